"""
Resolved option values: a closed tagged union, one variant per platform value kind.

Variants
- StringValue(text)
- IntegerValue(value)        64-bit signed
- BooleanValue(value)
- NumberValue(value)         double precision
- UserValue(user, member)    member is None outside guilds
- ChannelValue(channel)
- RoleValue(role)

Every variant carries a diagnostic __typename__ ("String", "Integer", ...) used
only inside error payloads; dispatch happens through structural pattern matching
on the variant classes (their __match_args__ mirror the constructor).

Accessor results
- UserOrMember: a user with its optional guild membership, so callers never have
  to unpack a (user, member) pair.
- Mentionable: MentionableUser | MentionableRole, the two shapes a mentionable
  option can resolve to.

Values are immutable once built.
"""
from abc import ABC, abstractmethod

from .records import User, PartialMember, PartialChannel, Role
from .utils import Unset, coalesce

INTEGER_MIN = -2 ** 63
INTEGER_MAX = 2 ** 63 - 1


class Value:
    """
    Base of the value union. Not instantiable on its own.
    """
    __slots__ = ()
    __match_args__ = ()
    __typename__ = "Unknown"

    def __init_subclass__(cls, /, typename=Unset, **options):
        super().__init_subclass__(**options)
        cls.__typename__ = coalesce(typename, cls.__name__.removesuffix("Value"))

    def __new__(cls, *args, **kwargs):
        if cls is Value:
            raise TypeError("cannot instantiate 'Value' directly")
        return super().__new__(cls)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__typename__} values are read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__typename__} values are read-only")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__match_args__)

    def __hash__(self):
        return hash((type(self), *(getattr(self, name) for name in self.__match_args__)))

    def __reduce__(self):
        return type(self), tuple(getattr(self, name) for name in self.__match_args__)

    def __repr__(self):
        return f"{type(self).__typename__}({', '.join(map(repr, self.__rich_repr__()))})"

    def __rich_repr__(self):
        for name in self.__match_args__:
            yield getattr(self, name)

    def _assign(self, **fields):
        for name, field in fields.items():
            object.__setattr__(self, name, field)


class StringValue(Value):
    __slots__ = ("text",)
    __match_args__ = ("text",)

    def __init__(self, text):
        if not isinstance(text, str):
            raise TypeError("StringValue() argument must be a string")
        self._assign(text=text)


class IntegerValue(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError("IntegerValue() argument must be an integer")
        if not INTEGER_MIN <= value <= INTEGER_MAX:
            raise ValueError("IntegerValue() argument must fit in a signed 64-bit integer")
        self._assign(value=value)


class BooleanValue(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value):
        if not isinstance(value, bool):
            raise TypeError("BooleanValue() argument must be a boolean")
        self._assign(value=value)


class NumberValue(Value):
    __slots__ = ("value",)
    __match_args__ = ("value",)

    def __init__(self, value):
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise TypeError("NumberValue() argument must be a number")
        self._assign(value=float(value))


class UserValue(Value):
    __slots__ = ("user", "member")
    __match_args__ = ("user", "member")

    def __init__(self, user, member=None):
        if not isinstance(user, User):
            raise TypeError("UserValue() first argument must be a User")
        if member is not None and not isinstance(member, PartialMember):
            raise TypeError("UserValue() second argument must be a PartialMember")
        self._assign(user=user, member=member)


class ChannelValue(Value):
    __slots__ = ("channel",)
    __match_args__ = ("channel",)

    def __init__(self, channel):
        if not isinstance(channel, PartialChannel):
            raise TypeError("ChannelValue() argument must be a PartialChannel")
        self._assign(channel=channel)


class RoleValue(Value):
    __slots__ = ("role",)
    __match_args__ = ("role",)

    def __init__(self, role):
        if not isinstance(role, Role):
            raise TypeError("RoleValue() argument must be a Role")
        self._assign(role=role)


class UserOrMember:
    """
    A user, optionally with its guild membership.

    The member is present when the option was used inside a guild, which spares a
    cache lookup for nicknames and roles.
    """
    __match_args__ = ("user", "member")

    def __init__(self, user, member=None):
        self._user = user
        self._member = member

    @property
    def user(self):
        return self._user

    @property
    def member(self):
        """
        The guild membership, or None.
        """
        return self._member

    def mention(self):
        return self._user.mention()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self._user, self._member) == (other._user, other._member)

    def __hash__(self):
        return hash(self._user)

    def __repr__(self):
        return f"user-or-member(user={self._user!r}, member={self._member!r})"

    def __rich_repr__(self):
        yield "user", self._user
        yield "member", self._member, None


class Mentionable(ABC):
    """
    Base of the two shapes a mentionable option resolves to.
    """
    __match_args__ = ()

    @abstractmethod
    def mention(self):
        ...


class MentionableUser(Mentionable):
    __match_args__ = ("target",)

    def __init__(self, target):
        if not isinstance(target, UserOrMember):
            raise TypeError("MentionableUser() argument must be a UserOrMember")
        self._target = target

    @property
    def target(self):
        return self._target

    def mention(self):
        return self._target.mention()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._target == other._target

    def __hash__(self):
        return hash(self._target)

    def __repr__(self):
        return f"mentionable-user({self._target!r})"


class MentionableRole(Mentionable):
    __match_args__ = ("role",)

    def __init__(self, role):
        if not isinstance(role, Role):
            raise TypeError("MentionableRole() argument must be a Role")
        self._role = role

    @property
    def role(self):
        return self._role

    def mention(self):
        return self._role.mention()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._role == other._role

    def __hash__(self):
        return hash(self._role)

    def __repr__(self):
        return f"mentionable-role({self._role!r})"


__all__ = (
    # Union
    "Value",
    "StringValue",
    "IntegerValue",
    "BooleanValue",
    "NumberValue",
    "UserValue",
    "ChannelValue",
    "RoleValue",

    # Accessor results
    "UserOrMember",
    "Mentionable",
    "MentionableUser",
    "MentionableRole",
)
