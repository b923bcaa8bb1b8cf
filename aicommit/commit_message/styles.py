"""Resolution of configured commit styles."""
from typing import Union

from ..exceptions import UnsupportedStyleError
from ..models import CommitStyle


def resolve_style(style: Union[CommitStyle, str]) -> CommitStyle:
    """Map a configured style name onto :class:`CommitStyle`.

    Raises:
        UnsupportedStyleError: If the name is not a known style.
    """
    try:
        return CommitStyle(style)
    except ValueError:
        raise UnsupportedStyleError(style) from None
