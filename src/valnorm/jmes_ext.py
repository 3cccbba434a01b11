from __future__ import annotations

from typing import Any

import jmespath
from jmespath import functions as _jp_funcs

from .api import to_boolean, to_float, to_instant, to_integer, to_text


class _CoercionFunctions(_jp_funcs.Functions):
    """Total coercions exposed to JMESPath expressions used by ``records``."""

    @_jp_funcs.signature({'types': []})
    def _func_to_int(self, value: Any) -> int:
        return to_integer(value)

    @_jp_funcs.signature({'types': []})
    def _func_to_float(self, value: Any) -> float:
        return to_float(value)

    @_jp_funcs.signature({'types': []})
    def _func_to_bool(self, value: Any) -> bool:
        return to_boolean(value)

    @_jp_funcs.signature({'types': []})
    def _func_to_text(self, value: Any) -> str:
        return to_text(value)

    @_jp_funcs.signature({'types': []})
    def _func_to_unix(self, value: Any) -> int:
        """Epoch seconds of whatever ``to_instant`` makes of *value*."""
        return to_instant(value).unix


USER_FUNCTIONS = _CoercionFunctions()
JP_OPTIONS = jmespath.Options(custom_functions=USER_FUNCTIONS)
