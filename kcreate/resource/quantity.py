"""
资源容量（Quantity）解析与比较
支持二进制后缀（Ki/Mi/Gi/...）、十进制后缀（n/u/m/k/M/G/...）以及科学计数法（1e3）
内部用 Fraction 保存精确值，不会出现浮点误差
"""

import math
import re
from fractions import Fraction
from functools import total_ordering

from kcreate.util.errors import ParseError

BINARY_SI = "BinarySI"
DECIMAL_SI = "DecimalSI"
DECIMAL_EXPONENT = "DecimalExponent"

_NUMBER_RE = re.compile(r"^([+-]?)([0-9]+(?:\.[0-9]*)?|\.[0-9]+)(.*)$")
_EXPONENT_RE = re.compile(r"^[eE]([+-]?[0-9]+)$")
# 科学计数法指数的取值范围
MAX_EXPONENT = 64

_BINARY_SUFFIXES = {
    "Ki": 10,
    "Mi": 20,
    "Gi": 30,
    "Ti": 40,
    "Pi": 50,
    "Ei": 60,
}

_DECIMAL_SUFFIXES = {
    "n": -9,
    "u": -6,
    "m": -3,
    "": 0,
    "k": 3,
    "K": 3,  # 兼容大写写法，输出时统一为 k
    "M": 6,
    "G": 9,
    "T": 12,
    "P": 15,
    "E": 18,
}

_DECIMAL_SUFFIX_BY_EXPONENT = {
    -9: "n",
    -6: "u",
    -3: "m",
    0: "",
    3: "k",
    6: "M",
    9: "G",
    12: "T",
    15: "P",
    18: "E",
}


def _parse_suffix(raw, suffix):
    """返回 (底数, 指数, 格式)"""
    if suffix in _BINARY_SUFFIXES:
        return 2, _BINARY_SUFFIXES[suffix], BINARY_SI
    if suffix in _DECIMAL_SUFFIXES:
        return 10, _DECIMAL_SUFFIXES[suffix], DECIMAL_SI
    match = _EXPONENT_RE.match(suffix)
    if match:
        digits = match.group(1).lstrip("+-").lstrip("0")
        if len(digits) > 3 or abs(int(match.group(1))) > MAX_EXPONENT:
            raise ParseError(raw, f"exponent must be within [-{MAX_EXPONENT}, {MAX_EXPONENT}]")
        return 10, int(match.group(1)), DECIMAL_EXPONENT
    raise ParseError(raw, "unable to parse quantity's suffix")


@total_ordering
class Quantity:
    """不可变的容量值，比较只看数值大小，与书写单位无关"""

    __slots__ = ("_value", "_format", "_raw")

    def __init__(self, value, fmt=DECIMAL_SI, raw=None):
        object.__setattr__(self, "_value", Fraction(value))
        object.__setattr__(self, "_format", fmt)
        object.__setattr__(self, "_raw", raw)

    def __setattr__(self, name, value):
        raise AttributeError("Quantity is immutable")

    @classmethod
    def parse(cls, raw):
        if not isinstance(raw, str) or not raw:
            raise ParseError(raw, "quantity cannot be empty")

        match = _NUMBER_RE.match(raw)
        if not match:
            raise ParseError(raw)
        sign, number, suffix = match.groups()

        base, exponent, fmt = _parse_suffix(raw, suffix)
        value = Fraction(number) * Fraction(base) ** exponent
        if sign == "-":
            value = -value
        return cls(value, fmt, raw)

    @property
    def value(self):
        return self._value

    @property
    def format(self):
        return self._format

    @property
    def raw(self):
        """解析前的原始字符串"""
        return self._raw

    def cmp(self, other):
        """self < other 返回 -1，相等返回 0，大于返回 1"""
        if self._value < other._value:
            return -1
        if self._value > other._value:
            return 1
        return 0

    def __eq__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value == other._value

    def __lt__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._value < other._value

    def __hash__(self):
        return hash(self._value)

    def canonical(self):
        """规范化字符串：保持原格式，选择能让尾数为整数的最大单位"""
        if self._value == 0:
            return "0"

        if self._format == BINARY_SI and self._value.denominator == 1:
            mantissa = self._value.numerator
            suffix = ""
            for name, shift in sorted(_BINARY_SUFFIXES.items(), key=lambda item: -item[1]):
                if abs(mantissa) % (1 << shift) == 0:
                    mantissa //= 1 << shift
                    suffix = name
                    break
            return f"{mantissa}{suffix}"

        mantissa, exponent = self._decimal_mantissa()
        if self._format == DECIMAL_EXPONENT:
            return f"{mantissa}e{exponent}" if exponent else f"{mantissa}"
        return f"{mantissa}{_DECIMAL_SUFFIX_BY_EXPONENT[exponent]}"

    def _decimal_mantissa(self):
        for exponent in range(18, -10, -3):
            scaled = self._value / Fraction(10) ** exponent
            if scaled.denominator == 1:
                return self._scale_exponent(scaled.numerator, exponent)

        # 小于 1n 的精度向远离零的方向取整
        scaled = abs(self._value) * 10 ** 9
        mantissa = math.ceil(scaled)
        if self._value < 0:
            mantissa = -mantissa
        return mantissa, -9

    def _scale_exponent(self, mantissa, exponent):
        # 科学计数法不受 E 后缀限制，继续按 1000 进位
        if self._format != DECIMAL_EXPONENT or exponent < 18:
            return mantissa, exponent
        while mantissa % 1000 == 0:
            mantissa //= 1000
            exponent += 3
        return mantissa, exponent

    def __str__(self):
        return self.canonical()

    def __repr__(self):
        return f"Quantity({self.canonical()!r})"


def parse_quantity(raw):
    """解析容量字符串，语法错误抛出 ParseError"""
    return Quantity.parse(raw)


def must_parse(raw):
    """用于常量和测试，与 parse_quantity 行为一致"""
    return Quantity.parse(raw)


def compare(a, b):
    return a.cmp(b)
