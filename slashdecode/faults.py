"""
slashdecode faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault the decoder
  can surface. Codes are grouped by domain so logs and searches stay predictable.
- DecodeException / DecodeWarning: base types carrying a message plus read-only
  options; they know how to render themselves through rich.
- MissingValueError / WrongTypeError: the only two errors a typed accessor raises.
- UnknownOptionKindWarning: emitted while parsing a payload with an option type
  the decoder has no variant for.
- trigger(): central entry point to surface a fault (raise/warn or print).

Message shape
- Field-first: every message embeds the option name in backticks so bot authors
  can echo it straight back to the user.
- Rich rendering: "[ prog — code | Title ]" header, the message, a single hint.

Host configuration (read from __main__, all optional)
- __prog__: name shown in headers (defaults to "slashdecode").
- __styles__: mapping overriding the default style names below.
- __codes__: mapping of FaultCode to custom labels (see FaultCode.normalize()).
"""
import functools
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used by the decoder (stable identifiers).

    grouping
    - lookup errors (2110x)
      • MISSING_VALUE, WRONG_TYPE
    - payload warnings (2210x)
      • UNKNOWN_OPTION_KIND
    """
    # --- lookup errors (21xxx) ---
    MISSING_VALUE               = 21101
    WRONG_TYPE                  = 21102

    # --- payload warnings (22xxx) ---
    UNKNOWN_OPTION_KIND         = 22101

    def normalize(self):
        """
        return a host-normalized string for this code.

        when __main__ exposes a __codes__ mapping its label wins; otherwise the
        numeric value is returned as a string.
        """
        return str(getattr(sys.modules["__main__"], "__codes__", {}).get(self, self.value))


def _render(fault, kind, palette):
    """
    Build the rich renderable shared by exceptions and warnings.

    `kind` selects the title style key ("error-title" / "warning-title");
    `palette` holds the default styles, overridable through __main__.__styles__.
    """
    main = sys.modules["__main__"]
    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment
        return Text(str(fragment), styles[style] if colorful else "")

    header = Text.assemble(
        "[ ",
        text(getattr(main, "__prog__", "slashdecode"), "prog-name"),
        " — ",
        text(fault.code.normalize() if fault.code else "-", "code"),
        " | ",
        text(fault.title.title(), kind),
        " ]"
    )
    message = text(fault.message, "message")
    hint = Text.assemble(text(" → ", "hint-arrow"), text(fault.hint, "hint")) if fault.hint else Text("")

    if fault.options.get("fancy", False):
        return Panel(Group(message, hint), title=header, title_align="left")
    return Group(header, message, hint)


class DecodeException(Exception):
    """
    Base class of every decoder error.

    Subclasses set `code`, `title` and a default `hint`; per-raise overrides
    travel in `options` (hint, shell, fancy, colorful).
    """
    code = Unset
    title = "decode error"
    hint = None

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)
        if "hint" in options:
            self.hint = options["hint"]

    def __str__(self):
        return self.message

    def __reduce__(self):
        # args holds the constructor arguments; options travel as a plain dict
        return functools.partial(type(self), **self.options), self.args

    def __rich__(self):
        return _render(self, "error-title", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        })

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class MissingValueError(DecodeException):
    """
    The field is not in the argument table, or it is there without a value.

    Always recoverable: callers usually treat it as "optional argument not supplied".
    """
    code = FaultCode.MISSING_VALUE
    title = "missing value"
    hint = "the option was not sent with this interaction"

    def __init__(self, name, /, **options):
        super().__init__(f"Missing value in field `{name}`", **options)
        self.args = (name,)
        self.name = name

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.name, **{**self.options, **overrides})


class WrongTypeError(DecodeException):
    """
    The field holds a value of a different kind than the accessor asked for.

    `expected` and `found` are the diagnostic type names ("String", "Integer", ...).
    """
    code = FaultCode.WRONG_TYPE
    title = "wrong type"

    def __init__(self, name, /, expected, found, **options):
        super().__init__(f"Wrong type in field `{name}` (expected `{expected}`, got `{found}`)", **options)
        self.args = (name, expected, found)
        self.name = name
        self.expected = expected
        self.found = found
        if "hint" not in options:
            self.hint = f"the command definition declares `{name}` as {found}"

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.name, self.expected, self.found, **{**self.options, **overrides})


class DecodeWarning(Warning):
    """
    Base class of non-fatal payload oddities.
    """
    code = Unset
    title = "decode warning"
    hint = None

    def __init__(self, message, /, **options):
        assert isinstance(message, str)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)
        if "hint" in options:
            self.hint = options["hint"]

    def __str__(self):
        return self.message

    def __reduce__(self):
        # args holds the constructor arguments; options travel as a plain dict
        return functools.partial(type(self), **self.options), self.args

    def __rich__(self):
        return _render(self, "warning-title", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",
            "message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def __trigger__(self):
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=self.options.get("stacklevel", 3))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownOptionKindWarning(DecodeWarning):
    """
    A payload option carried a type number with no matching OptionKind.

    The option is kept with its raw type number and without a resolved value.
    """
    code = FaultCode.UNKNOWN_OPTION_KIND
    title = "unknown option kind"
    hint = "reading it will report a missing value"

    def __init__(self, name, /, kind, **options):
        super().__init__(f"Unknown type `{kind}` for option `{name}`", **options)
        self.args = (name, kind)
        self.name = name
        self.kind = kind

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.name, self.kind, **{**self.options, **overrides})


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into a copy of the fault via __replace__(**options).
    - shell=False (default): exceptions are raised, warnings go through warnings.warn.
    - shell=True: the fault is printed on the stderr rich console instead.

    typical options
    - shell, fancy, colorful, hint.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "DecodeException",
    "MissingValueError",
    "WrongTypeError",
    "DecodeWarning",
    "UnknownOptionKindWarning",
    "trigger",
)
