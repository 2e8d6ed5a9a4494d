"""CalcService — integer conversion and math helpers as service operations."""

from __future__ import annotations

from aockit.domain.numbers import abs_int, int_to_str, power, str_to_int
from aockit.services.base import HANDLED_ERRORS, BaseService
from aockit.services.result import ServiceResult


class CalcService(BaseService):
    def absolute(self, x: int) -> ServiceResult:
        return ServiceResult(ok=True, op="calc_abs", data={"input": x, "value": abs_int(x)})

    def power(self, n: int, m: int) -> ServiceResult:
        op = "calc_pow"
        try:
            value = power(n, m)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc, base=n, exponent=m)
        return ServiceResult(ok=True, op=op, data={"base": n, "exponent": m, "value": value})

    def parse_int(self, text: str) -> ServiceResult:
        """Convert *text* to an int and echo its normalized string form."""
        op = "calc_int"
        try:
            value = str_to_int(text)
        except HANDLED_ERRORS as exc:
            return self._failure(op, exc, text=text)
        return ServiceResult(
            ok=True,
            op=op,
            data={"text": text, "value": value, "normalized": int_to_str(value)},
        )
