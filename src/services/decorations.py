"""Badges, colors and tooltips shown next to changed files."""

from ..schemas import ChangeStatus, FolderNode, NodeSummary, TreeNode

STATUS_LABELS = {
    ChangeStatus.ADDED: "Added",
    ChangeStatus.MODIFIED: "Modified",
    ChangeStatus.DELETED: "Deleted",
    ChangeStatus.RENAMED: "Renamed",
    ChangeStatus.COPIED: "Copied",
    ChangeStatus.TYPE_CHANGED: "Type changed",
    ChangeStatus.UNMERGED: "Unmerged",
    ChangeStatus.UNKNOWN: "Unknown",
}

STATUS_BADGES = {status: status.value for status in ChangeStatus}

# Theme color identifiers; type changes and unknown codes are left uncolored
STATUS_COLORS = {
    ChangeStatus.ADDED: "gitDecoration.addedResourceForeground",
    ChangeStatus.MODIFIED: "gitDecoration.modifiedResourceForeground",
    ChangeStatus.DELETED: "gitDecoration.deletedResourceForeground",
    ChangeStatus.RENAMED: "gitDecoration.renamedResourceForeground",
    ChangeStatus.COPIED: "gitDecoration.addedResourceForeground",
    ChangeStatus.UNMERGED: "gitDecoration.conflictingResourceForeground",
}


def status_tooltip(path: str, status: ChangeStatus, code: str) -> str:
    label = STATUS_LABELS[status]
    if status is ChangeStatus.UNKNOWN and code != status.value:
        label = f"{label} ({code})"
    return f"{path}: {label}"


def summarize_node(node: TreeNode) -> NodeSummary:
    """Flatten a tree node into what the UI needs to draw one row."""
    if isinstance(node, FolderNode):
        return NodeSummary(
            type="folder",
            label=node.label,
            path=node.path,
            child_count=len(node.children),
        )
    record = node.record
    badge = record.code if record.status is ChangeStatus.UNKNOWN else STATUS_BADGES[record.status]
    return NodeSummary(
        type="file",
        label=node.label,
        path=node.path,
        status=record.status.value,
        old_path=node.old_path,
        badge=badge,
        tooltip=status_tooltip(node.path, record.status, record.code),
    )
