r"""
slashdecode argument table and typed accessors.

Overview
- ValueCell
  • Holds the resolved Value of one leaf option (possibly absent) and the
    option's name, kept for error messages.
  • Typed accessors pattern-match the value against the requested variant.
- ArgumentTable
  • Read-only mapping from option name to ValueCell, built once per decode.
  • Same accessors, looked up by name; a name that is not in the table fails
    exactly like a cell without a value.
- from_arguments(target, table)
  • Build an object from a table through its __from_arguments__ hook.

Accessor contract (get_string, get_integer, get_boolean, get_number, get_user,
get_channel, get_role, get_mentionable)
1. Name absent from the table → MissingValueError(name).
2. Cell present without a value → MissingValueError(name).
3. Value of another variant → WrongTypeError(name, expected, found).
4. Otherwise → an owned copy of the decoded value.

get_user composes the user and its optional membership into a UserOrMember.
get_mentionable is the only accessor accepting two variants (User or Role).
Accessors never mutate anything; each call succeeds or fails on its own.

Defaults
- Table accessors take an optional `default`, returned instead of raising
  MissingValueError. WrongTypeError is never swallowed.

Quick example:
    >>> path, arguments = process(root)
    >>> arguments.get_string("text")
    'hi'
    >>> arguments.get_integer("integer", default=0)
    0
"""
import copy
from collections.abc import Mapping
from types import MappingProxyType

from .faults import MissingValueError, WrongTypeError
from .utils import *
from .values import *


class ValueCell:
    """
    One decoded argument: an optional Value plus the option name.
    """
    __slots__ = ("_name", "_inner")

    def __init__(self, name, inner=None, /):
        if not isinstance(name, str):
            raise TypeError("ValueCell() first argument must be a string")
        if inner is not None and not isinstance(inner, Value):
            raise TypeError("ValueCell() second argument must be a Value")
        self._name = name
        self._inner = inner

    name = mirror("name")
    inner = mirror("inner")

    @property
    def typename(self):
        """
        Diagnostic name of the held variant ("String", "Integer", ...), None when empty.
        """
        if self._inner is None:
            return None
        return type(self._inner).__typename__

    def expect_some(self):
        """
        Return the raw Value, or raise MissingValueError when the cell is empty.
        """
        if self._inner is None:
            raise MissingValueError(self._name)
        return self._inner

    def _mismatch(self, expected, /):
        return WrongTypeError(self._name, expected, self.typename)

    def get_string(self):
        match self.expect_some():
            case StringValue(text):
                return text
            case _:
                raise self._mismatch("String")

    def get_integer(self):
        match self.expect_some():
            case IntegerValue(value):
                return value
            case _:
                raise self._mismatch("Integer")

    def get_boolean(self):
        match self.expect_some():
            case BooleanValue(value):
                return value
            case _:
                raise self._mismatch("Boolean")

    def get_number(self):
        match self.expect_some():
            case NumberValue(value):
                return value
            case _:
                raise self._mismatch("Number")

    def get_user(self):
        match self.expect_some():
            case UserValue(user, member):
                return UserOrMember(copy.deepcopy(user), copy.deepcopy(member))
            case _:
                raise self._mismatch("User")

    def get_channel(self):
        match self.expect_some():
            case ChannelValue(channel):
                return copy.deepcopy(channel)
            case _:
                raise self._mismatch("Channel")

    def get_role(self):
        match self.expect_some():
            case RoleValue(role):
                return copy.deepcopy(role)
            case _:
                raise self._mismatch("Role")

    def get_mentionable(self):
        match self.expect_some():
            case UserValue(user, member):
                return MentionableUser(UserOrMember(copy.deepcopy(user), copy.deepcopy(member)))
            case RoleValue(role):
                return MentionableRole(copy.deepcopy(role))
            case _:
                raise self._mismatch("Mentionable")

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return (self._name, self._inner) == (other._name, other._inner)

    def __hash__(self):
        return hash((self._name, self._inner))

    def __repr__(self):
        return f"value-cell(name={self._name!r}, inner={self._inner!r})"

    def __rich_repr__(self):
        yield "name", self._name
        yield "inner", self._inner


def _accessor(name, /):
    """
    Build the table-level accessor forwarding to ValueCell.<name> for a looked-up cell.
    """

    @rename(name)
    def accessor(self, key, /, *, default=Unset):
        try:
            return getattr(self._lookup(key), name)()
        except MissingValueError:
            if default is Unset:
                raise
            return default

    accessor.__doc__ = f"""
        Look up `key` and return ValueCell.{name}() for it.

        Raises MissingValueError when the key is absent or holds no value, unless
        a `default` is given; WrongTypeError is always raised.
    """
    return accessor


class ArgumentTable(Mapping):
    """
    Read-only mapping of option name to ValueCell.

    Unique option names are trusted; when a payload repeats a name the later
    option wins.
    """

    def __init__(self, cells=(), /):
        cells = {cell.name: cell for cell in cells}
        self._cells = MappingProxyType(cells)

    @classmethod
    def from_options(cls, options, /):
        """
        Build a table from leaf InteractionNodes, one cell per option.
        """
        return cls(ValueCell(option.name, option.resolved) for option in options)

    def _lookup(self, key, /):
        try:
            return self._cells[key]
        except KeyError:
            raise MissingValueError(key) from None

    def __getitem__(self, key, /):
        return self._cells[key]

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return len(self._cells)

    get_string = _accessor("get_string")
    get_integer = _accessor("get_integer")
    get_boolean = _accessor("get_boolean")
    get_number = _accessor("get_number")
    get_user = _accessor("get_user")
    get_channel = _accessor("get_channel")
    get_role = _accessor("get_role")
    get_mentionable = _accessor("get_mentionable")

    def __repr__(self):
        return f"argument-table({dict(self._cells)!r})"

    def __rich_repr__(self):
        for name, cell in self._cells.items():
            yield name, cell.inner


def from_arguments(target, table, /):
    """
    Build `target` from an ArgumentTable through its __from_arguments__ hook.

    The hook is usually a classmethod reading fields with the typed accessors;
    any MissingValueError/WrongTypeError it raises propagates unchanged.

    Example
        class Ban:
            @classmethod
            def __from_arguments__(cls, table):
                return cls(table.get_user("target"), table.get_string("reason", default=None))

        ban = from_arguments(Ban, arguments)
    """
    if not isinstance(table, ArgumentTable):
        raise TypeError("from_arguments() second argument must be an ArgumentTable")
    if not hasattr(target, "__from_arguments__") or not callable(target.__from_arguments__):
        raise TypeError("from_arguments() first argument must have a __from_arguments__ method")
    return target.__from_arguments__(table)


__all__ = (
    "ValueCell",
    "ArgumentTable",
    "from_arguments",
)
