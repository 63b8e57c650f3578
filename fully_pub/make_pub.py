"""Logic for widening a node's visibility."""

from fully_pub.items import Field, VisibleItem
from fully_pub.visibility import Visibility


def make_pub(node: VisibleItem | Field) -> None:
    """Set the node's visibility to public."""
    node.vis = Visibility.PUBLIC
