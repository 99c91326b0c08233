"""
Substitute Messages
===================
Short replacement text for an archived stack trace: `<message> (<locator>)`.
"""

from typing import TextIO, Union

from ..core.types import FailureInfo


def render_substitute(
    failure: Union[FailureInfo, BaseException],
    locator: str,
    output: TextIO,
) -> None:
    """Append the substitute message for `failure` to `output`."""
    failure = FailureInfo.coerce(failure)
    output.write(failure.message or "")
    output.write(" (")
    output.write(locator)
    output.write(")")
