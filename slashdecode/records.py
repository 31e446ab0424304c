"""
Platform records referenced by option values.

The decoder never interprets these beyond copying them: a user, a guild member,
a partially resolved channel and a role, exactly as the platform resolved them
for the interaction.

- RecordType metaclass
  • Exposes every name in __introspectable__ as a read-only property mirroring
    the private "_name" backing field.
  • Derives __typename__ from the class name ("PartialChannel" -> "partial-channel").
- Record base
  • Keyword construction limited to the introspectable fields (missing ones are None).
  • Value equality, stable __repr__ and __rich_repr__.
  • from_payload(data): build a record from the platform's JSON object.

Snowflakes are stored as int; the platform sends them as strings.
"""
import functools
import operator
import re

from .utils import *


def _snowflake(object, /):
    return int(object) if object is not None else None


class RecordType(type):
    """
    Metaclass that turns record declarations into read-only value types.

    Conventions
    - __introspectable__ lists the public fields, in display order.
    - __typename__ is the hyphenated lowercase class name, used in reprs.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        return super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )


class Record(metaclass=RecordType):
    __introspectable__ = ()

    def __init__(self, **fields):
        if unknown := fields.keys() - set(type(self).__introspectable__):
            raise TypeError(f"{type(self).__name__}() got unexpected fields: {', '.join(sorted(unknown))}")
        for name in type(self).__introspectable__:
            setattr(self, "_" + name, fields.get(name))

    def __repr__(self):
        return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(
            getattr(self, "_" + name) == getattr(other, "_" + name)
            for name in type(self).__introspectable__
        )

    def __hash__(self):
        return hash((type(self), getattr(self, "_id", None)))


class User(Record):
    """
    A platform user account.
    """
    __introspectable__ = (
        "id",
        "name",
        "discriminator",
        "global_name",
        "avatar",
        "bot",
    )

    @classmethod
    def from_payload(cls, data, /):
        return cls(
            id=_snowflake(data["id"]),
            name=data.get("username"),
            discriminator=data.get("discriminator"),
            global_name=data.get("global_name"),
            avatar=data.get("avatar"),
            bot=bool(data.get("bot", False)),
        )

    def mention(self):
        return f"<@{self.id}>"


class PartialMember(Record):
    """
    Guild membership of a user, as sent alongside a resolved user.

    The platform omits the nested user object here; pair it with the User record.
    """
    __introspectable__ = (
        "nick",
        "roles",
        "joined_at",
        "permissions",
        "pending",
    )

    @classmethod
    def from_payload(cls, data, /):
        return cls(
            nick=data.get("nick"),
            roles=tuple(map(_snowflake, data.get("roles", ()))),
            joined_at=data.get("joined_at"),
            permissions=data.get("permissions"),
            pending=bool(data.get("pending", False)),
        )


class PartialChannel(Record):
    """
    A channel as resolved for an interaction (id, name, type and permissions only).
    """
    __introspectable__ = (
        "id",
        "name",
        "kind",
        "permissions",
    )

    @classmethod
    def from_payload(cls, data, /):
        return cls(
            id=_snowflake(data["id"]),
            name=data.get("name"),
            kind=data.get("type"),
            permissions=data.get("permissions"),
        )

    def mention(self):
        return f"<#{self.id}>"


class Role(Record):
    """
    A guild role.
    """
    __introspectable__ = (
        "id",
        "name",
        "color",
        "hoist",
        "position",
        "permissions",
        "managed",
        "mentionable",
    )

    @classmethod
    def from_payload(cls, data, /):
        return cls(
            id=_snowflake(data["id"]),
            name=data.get("name"),
            color=data.get("color", 0),
            hoist=bool(data.get("hoist", False)),
            position=data.get("position", 0),
            permissions=data.get("permissions"),
            managed=bool(data.get("managed", False)),
            mentionable=bool(data.get("mentionable", False)),
        )

    def mention(self):
        return f"<@&{self.id}>"


__all__ = (
    "Record",
    "User",
    "PartialMember",
    "PartialChannel",
    "Role",
)
