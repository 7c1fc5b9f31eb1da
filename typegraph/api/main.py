from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from typegraph.config import load_settings
from typegraph.core.loader import DeclarationFormatError, declarations_from_json
from typegraph.graph.pipeline import AssociationGraphBuilder
from typegraph.render.diagram import render_diagram

app = FastAPI(
    title="typegraph",
    description="Deduplicated association graphs for class diagrams",
    version="0.1.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class DeclarationsRequest(BaseModel):
    files: List[Dict[str, Any]]


class DiagramRequest(BaseModel):
    files: List[Dict[str, Any]]
    settings: Optional[Dict[str, Any]] = None


def _build(files: List[Dict[str, Any]], verbose: bool = False) -> AssociationGraphBuilder:
    try:
        declarations = declarations_from_json({"files": files})
    except DeclarationFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))

    builder = AssociationGraphBuilder(declarations, verbose=verbose)
    builder.build()
    return builder


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/associations")
def associations(req: DeclarationsRequest):
    """Final association list of every file, plus counts from the working edge set."""
    builder = _build(req.files)
    return {
        "files": [
            {
                "file_name": decl.file_name,
                "associations": [a.to_dict() for a in decl.member_associations]
            }
            for decl in builder.declarations
        ],
        "total": len(builder.associations),
        "inherited": len(builder.associations.get_inherited()),
        "stats": builder.associations.statistics()
    }


@app.post("/diagram")
def diagram(req: DiagramRequest):
    """Render the declarations as nomnoml DSL."""
    settings = load_settings()
    if req.settings:
        try:
            settings = settings.from_dict(req.settings)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    builder = _build(req.files, verbose=settings.verbose)
    dsl = render_diagram(builder.declarations, settings, catalog=builder.catalog)
    return {"dsl": dsl}
