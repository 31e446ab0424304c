"""
slashdecode command layer: from an interaction tree to (path, arguments).

What this module provides
- resolve(root): walk the subcommand chain and return the path segments plus
  the leaf options found where the walk stopped.
- process(root): resolve, join the path with SEPARATOR, build the ArgumentTable.
- decode(payload): parse a raw interaction payload and process it.

Path resolution
- The path starts with the root command's name.
- Only the first child of the current level is inspected: if it is a
  SUB_COMMAND or SUB_COMMAND_GROUP its name is appended and the walk descends
  into its children, otherwise the walk stops without consuming it.
- The platform never sends a subcommand next to siblings of the same level, so
  the chain is singly-branching. Should that ever be violated, the first child
  still decides.

Quick start
    from slashdecode import decode

    path, arguments = decode(interaction["data"])
    match path:
        case "mod ban":
            ban(arguments.get_user("target"), arguments.get_string("reason", default=None))
        case "mod kick":
            ...

Neither resolve() nor process() can fail on a well-formed tree: all faults come
from the typed accessors of the returned ArgumentTable.
"""
import logging
from collections.abc import Mapping

from .arguments import ArgumentTable
from .nodes import InteractionNode, OptionKind

logger = logging.getLogger(__name__)

SEPARATOR = " "


def resolve(root, /):
    """
    Split an interaction tree into its command path and leaf options.

    Returns
    - tuple[str, ...]: path segments, root first (never empty).
    - tuple[InteractionNode, ...]: options at the level where the walk stopped.
    """
    if not isinstance(root, InteractionNode):
        raise TypeError("resolve() argument must be an InteractionNode")

    path = [root.name]
    options = root.children

    while options:
        first, *_ = options
        if first.kind not in (OptionKind.SUB_COMMAND, OptionKind.SUB_COMMAND_GROUP):
            break
        path.append(first.name)
        options = first.children

    return tuple(path), tuple(options)


def process(root, /):
    """
    Decode an interaction tree into its spaced path and argument table.

    Example
    - "mod" → "ban" → {reason: "spam"} gives ("mod ban", {"reason": ...}).
    """
    path, options = resolve(root)
    arguments = ArgumentTable.from_options(options)
    logger.debug("decoded %r with %d argument(s)", SEPARATOR.join(path), len(arguments))
    return SEPARATOR.join(path), arguments


def decode(payload, /):
    """
    Parse and process a raw application command payload.

    Accepts the interaction's `data` object or the whole interaction (its `data`
    member is used).
    """
    if not isinstance(payload, Mapping):
        raise TypeError("decode() argument must be a mapping")
    if "name" not in payload and "data" in payload:
        payload = payload["data"]
    return process(InteractionNode.from_payload(payload))


__all__ = (
    "SEPARATOR",
    "resolve",
    "process",
    "decode",
)
