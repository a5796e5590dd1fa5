"""Bind the frame-context capabilities to live CPython frame objects.

The adapter only reads ``f_code``, ``f_locals``, ``f_globals`` and
``f_lineno``; it never evaluates code in the frame.
"""

from __future__ import annotations

import inspect
import traceback
import types

from .context import Construct
from .describe import DEFAULT_SELF_CLIP_WIDTH
from .frame import Frame


def clip_repr(value: object, width: int = DEFAULT_SELF_CLIP_WIDTH) -> str:
    """Return ``repr(value)`` when it fits on one line of ``width``, else a type tag."""
    fallback = f"<{type(value).__qualname__} object>"
    try:
        text = repr(value)
    except Exception:
        return fallback
    if len(text) > width or "\n" in text:
        return fallback
    return text


class PythonFrameContext:
    """Read-only view of one ``types.FrameType``.

    ``lineno`` overrides ``f_lineno`` for frames taken from a traceback, where
    the recorded line is the one that was executing when the error passed.
    """

    def __init__(self, frame: types.FrameType, lineno: int | None = None) -> None:
        self.frame = frame
        self.lineno = lineno

    def __repr__(self) -> str:
        filename, lineno = self.source_location()
        return f"PythonFrameContext({self.frame.f_code.co_name!r}, {filename!r}:{lineno})"

    def _is_class_body(self) -> bool:
        local_names = self.frame.f_locals
        return (
            not self.frame.f_code.co_argcount
            and "__module__" in local_names
            and "__qualname__" in local_names
        )

    def _module_name(self) -> str:
        return str(self.frame.f_globals.get("__name__", "?"))

    def _bound_first_argument(self) -> tuple[str, object] | None:
        code = self.frame.f_code
        if not code.co_argcount:
            return None
        name = code.co_varnames[0]
        if name not in ("self", "cls") or name not in self.frame.f_locals:
            return None
        return name, self.frame.f_locals[name]

    def defining_construct(self) -> Construct:
        code = self.frame.f_code
        if code.co_name == "<module>":
            module_name = self._module_name()
            if module_name == "__main__":
                return Construct("main")
            return Construct("module", module_name)
        if self._is_class_body():
            return Construct("class", str(self.frame.f_locals["__qualname__"]))
        return Construct("function", code.co_name)

    def parameters(self) -> list[str]:
        """Parameter spellings in declaration order, read from the code object.

        Compiler-generated arguments such as the ``.0`` iterator of
        comprehensions and generator expressions are not identifiers and are
        left out.
        """
        code = self.frame.f_code
        names = code.co_varnames
        keyword_only = list(names[code.co_argcount : code.co_argcount + code.co_kwonlyargcount])
        index = code.co_argcount + code.co_kwonlyargcount

        params = [name for name in names[: code.co_argcount] if name.isidentifier()]
        if code.co_flags & inspect.CO_VARARGS:
            params.append(f"*{names[index]}")
            index += 1
        elif keyword_only:
            params.append("*")
        params.extend(keyword_only)
        if code.co_flags & inspect.CO_VARKEYWORDS:
            params.append(f"**{names[index]}")
        return params

    def signature(self) -> str | None:
        if self.defining_construct().kind != "function":
            return None
        code = self.frame.f_code
        name = getattr(code, "co_qualname", code.co_name)
        bound = self._bound_first_argument()
        if bound is not None:
            arg_name, value = bound
            if arg_name == "cls" and isinstance(value, type):
                name = f"{value.__qualname__}.{code.co_name}"
            elif arg_name == "self":
                name = f"{type(value).__qualname__}.{code.co_name}"
        return f"{name}({', '.join(self.parameters())})"

    def describe_self(self, width: int) -> str:
        bound = self._bound_first_argument()
        if bound is not None:
            return clip_repr(bound[1], width)
        construct = self.defining_construct()
        if construct.kind == "class":
            return f"<class body {construct.name}>"
        return f"<module {self._module_name()}>"

    def source_location(self) -> tuple[str, int]:
        lineno = self.lineno if self.lineno is not None else self.frame.f_lineno
        return self.frame.f_code.co_filename, lineno or 0


def frames_from_traceback(tb: types.TracebackType | None) -> list[Frame]:
    """Wrap the frames recorded in ``tb``, innermost first.

    ``traceback.walk_tb`` yields outermost first, so the order is reversed.
    """
    walked = list(traceback.walk_tb(tb))
    return [Frame(PythonFrameContext(frame, lineno)) for frame, lineno in reversed(walked)]
