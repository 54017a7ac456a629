import asyncio
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from src.dependencies import get_compare_coordinator
from src.schemas import BaseReferenceUpdate, DiffTarget, NodeSummary, TreeResponse
from src.services import CompareCoordinator, GitQueryError
from src.services.decorations import summarize_node
from src.services.tree_builder import find_folder

router = APIRouter(prefix="/git-compare", tags=["git-compare"])


def _tree_response(coordinator: CompareCoordinator) -> TreeResponse:
    return TreeResponse(
        base_reference=coordinator.base_reference,
        file_count=coordinator.file_count(),
        children=[summarize_node(node) for node in coordinator.get_root_children()],
    )


@router.get("/health")
async def compare_health_check():
    """Simple health check for git-compare endpoints."""
    return {"status": "git-compare endpoints available"}


@router.post("/refresh", response_model=TreeResponse)
async def refresh_tree(
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    """Rebuild the changed-files tree against the current base reference."""
    try:
        await asyncio.to_thread(coordinator.refresh)
    except GitQueryError as e:
        raise HTTPException(status_code=502, detail=f"Refresh failed: {str(e)}")
    return _tree_response(coordinator)


@router.get("/tree", response_model=TreeResponse)
async def get_tree(coordinator: CompareCoordinator = Depends(get_compare_coordinator)):
    """Top level of the most recently built tree."""
    return _tree_response(coordinator)


@router.get("/tree/children", response_model=List[NodeSummary])
async def get_tree_children(
    path: str = Query(..., description="Path of the folder to list"),
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    """Sorted children of one folder of the tree."""
    folder = find_folder(coordinator.root, path)
    if folder is None:
        raise HTTPException(status_code=404, detail=f"Folder not found: {path}")
    return [summarize_node(node) for node in coordinator.get_children_of(folder)]


@router.get("/base-reference", response_model=Dict[str, str])
async def get_base_reference(
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    return {"base_reference": coordinator.base_reference}


@router.put("/base-reference", response_model=TreeResponse)
async def set_base_reference(
    request: BaseReferenceUpdate,
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    """Switch the base reference and rebuild the tree."""
    if not request.name.strip():
        raise HTTPException(status_code=400, detail="Base reference cannot be empty")

    try:
        await asyncio.to_thread(coordinator.set_base_reference, request.name)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GitQueryError as e:
        raise HTTPException(status_code=502, detail=f"Refresh failed: {str(e)}")
    return _tree_response(coordinator)


@router.get("/branches", response_model=Dict[str, Any])
async def list_branches(
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    """Branches that can be picked as the new base reference."""
    branches = await asyncio.to_thread(coordinator.list_branches)
    current_branch = await asyncio.to_thread(coordinator.get_current_branch)
    return {
        "current": coordinator.base_reference,
        "current_branch": current_branch,
        "branches": branches,
    }


@router.get("/diff/{file_path:path}", response_model=DiffTarget)
async def describe_diff(
    file_path: str,
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    """How to open the diff for a changed file."""
    try:
        return await asyncio.to_thread(coordinator.describe_diff, file_path)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Not a changed file: {file_path}")


@router.get("/content/{file_path:path}", response_class=PlainTextResponse)
async def get_file_content(
    file_path: str,
    ref: Optional[str] = None,
    coordinator: CompareCoordinator = Depends(get_compare_coordinator),
):
    """File content at `ref`, defaulting to the comparison point."""
    try:
        return await asyncio.to_thread(coordinator.get_file_content, file_path, ref)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GitQueryError as e:
        raise HTTPException(status_code=502, detail=f"Failed to read file: {str(e)}")
