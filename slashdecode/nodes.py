"""
Interaction option trees.

An interaction delivers the invoked command as a tree: the root carries the
command name, every option below it is either a nesting node (subcommand or
subcommand group) or a leaf holding the resolved argument value.

What this module provides
- OptionKind: the platform's option type numbers.
- InteractionNode: one read-only node of the tree (name, kind, children, resolved).
- InteractionNode.from_payload(data): build the tree from the JSON `data` object
  of an application command interaction, resolving user/member/channel/role
  references through its `resolved` section.

Payload shape (only the fields read here)
    {
        "name": "mod",
        "options": [
            {"name": "ban", "type": 1, "options": [
                {"name": "target", "type": 6, "value": "80351110224678912"},
            ]},
        ],
        "resolved": {"users": {...}, "members": {...}, "channels": {...}, "roles": {...}},
    }

A reference that cannot be resolved, or an option without "value", becomes a
node without a resolved value; reading it later reports a missing value.
"""
import logging
from enum import IntEnum

from .faults import UnknownOptionKindWarning, trigger
from .records import *
from .values import *

logger = logging.getLogger(__name__)


class OptionKind(IntEnum):
    """
    option type numbers as sent by the platform.

    SUB_COMMAND and SUB_COMMAND_GROUP nest further options; all others are leaves.
    """
    SUB_COMMAND         = 1
    SUB_COMMAND_GROUP   = 2
    STRING              = 3
    INTEGER             = 4
    BOOLEAN             = 5
    USER                = 6
    CHANNEL             = 7
    ROLE                = 8
    MENTIONABLE         = 9
    NUMBER              = 10

    @property
    def nesting(self):
        """
        True for the kinds that group further options instead of holding a value.
        """
        return self in (OptionKind.SUB_COMMAND, OptionKind.SUB_COMMAND_GROUP)


class InteractionNode(Record):
    """
    A node of the invoked command tree.

    Fields
    - name: str
    - kind: OptionKind, None for the root command (a raw int for unknown kinds).
    - children: nested options, in payload order (empty for leaves).
    - resolved: Value | None, the decoded argument of a leaf.
    """
    __introspectable__ = (
        "name",
        "kind",
        "children",
        "resolved",
    )

    def __init__(self, name, /, kind=None, children=(), resolved=None):
        if not isinstance(name, str):
            raise TypeError("InteractionNode() name must be a string")
        if resolved is not None and not isinstance(resolved, Value):
            raise TypeError("InteractionNode() resolved must be a Value")
        super().__init__(name=name, kind=kind, children=tuple(children), resolved=resolved)

    def __hash__(self):
        return hash((type(self), self._name, self._kind))

    @classmethod
    def from_payload(cls, data, /):
        """
        Build the root node from an application command's `data` object.
        """
        resolved = data.get("resolved") or {}
        return cls(data["name"], children=(_parse_option(option, resolved) for option in (data.get("options") or ())))


def _parse_option(data, resolved, /):
    name = data["name"]
    try:
        kind = OptionKind(data["type"])
    except ValueError:
        trigger(UnknownOptionKindWarning(name, data["type"]))
        kind = data["type"]
    return InteractionNode(
        name,
        kind=kind,
        children=(_parse_option(option, resolved) for option in (data.get("options") or ())),
        resolved=_resolve_value(name, kind, data.get("value"), resolved),
    )


def _lookup_user(id, resolved, /):
    if (user := resolved.get("users", {}).get(id)) is None:
        return None
    member = resolved.get("members", {}).get(id)
    return UserValue(
        User.from_payload(user),
        PartialMember.from_payload(member) if member is not None else None,
    )


def _lookup_role(id, resolved, /):
    if (role := resolved.get("roles", {}).get(id)) is None:
        return None
    return RoleValue(Role.from_payload(role))


def _lookup_channel(id, resolved, /):
    if (channel := resolved.get("channels", {}).get(id)) is None:
        return None
    return ChannelValue(PartialChannel.from_payload(channel))


def _resolve_value(name, kind, value, resolved, /):
    if value is None:
        return None
    match kind:
        case OptionKind.STRING:
            return StringValue(value)
        case OptionKind.INTEGER:
            return IntegerValue(value)
        case OptionKind.BOOLEAN:
            return BooleanValue(value)
        case OptionKind.NUMBER:
            return NumberValue(value)
        case OptionKind.USER:
            object = _lookup_user(str(value), resolved)
        case OptionKind.CHANNEL:
            object = _lookup_channel(str(value), resolved)
        case OptionKind.ROLE:
            object = _lookup_role(str(value), resolved)
        case OptionKind.MENTIONABLE:
            # users win over roles when both maps carry the snowflake
            object = _lookup_user(str(value), resolved) or _lookup_role(str(value), resolved)
        case _:
            return None
    if object is None:
        logger.debug("option %r references %s which is missing from the resolved data", name, value)
    return object


__all__ = (
    "OptionKind",
    "InteractionNode",
)
