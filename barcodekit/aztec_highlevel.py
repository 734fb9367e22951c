"""Optimal high-level encoding of data into Aztec code words."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union

from .bitlist import BitList


class Mode(enum.IntEnum):
    """Character tables an Aztec encoder can latch or shift into."""

    UPPER = 0
    LOWER = 1
    DIGIT = 2
    MIXED = 3
    PUNCT = 4

    @property
    def bit_count(self) -> int:
        """Width of one code in this mode."""
        return 4 if self is Mode.DIGIT else 5


# For each pair of modes, the cheapest way to latch from one to the other.
# The high half-word holds the number of bits, the low half-word the bits.
_LATCH_TABLE = {
    Mode.UPPER: {
        Mode.UPPER: 0,
        Mode.LOWER: (5 << 16) + 28,
        Mode.DIGIT: (5 << 16) + 30,
        Mode.MIXED: (5 << 16) + 29,
        Mode.PUNCT: (10 << 16) + (29 << 5) + 30,
    },
    Mode.LOWER: {
        Mode.UPPER: (9 << 16) + (30 << 4) + 14,
        Mode.LOWER: 0,
        Mode.DIGIT: (5 << 16) + 30,
        Mode.MIXED: (5 << 16) + 29,
        Mode.PUNCT: (10 << 16) + (29 << 5) + 30,
    },
    Mode.DIGIT: {
        Mode.UPPER: (4 << 16) + 14,
        Mode.LOWER: (9 << 16) + (14 << 5) + 28,
        Mode.DIGIT: 0,
        Mode.MIXED: (9 << 16) + (14 << 5) + 29,
        Mode.PUNCT: (14 << 16) + (14 << 10) + (29 << 5) + 30,
    },
    Mode.MIXED: {
        Mode.UPPER: (5 << 16) + 29,
        Mode.LOWER: (5 << 16) + 28,
        Mode.DIGIT: (10 << 16) + (29 << 5) + 30,
        Mode.MIXED: 0,
        Mode.PUNCT: (5 << 16) + 30,
    },
    Mode.PUNCT: {
        Mode.UPPER: (5 << 16) + 31,
        Mode.LOWER: (10 << 16) + (31 << 5) + 28,
        Mode.DIGIT: (10 << 16) + (31 << 5) + 30,
        Mode.MIXED: (10 << 16) + (31 << 5) + 29,
        Mode.PUNCT: 0,
    },
}

# Available shift codes (shifts to binary are handled separately).
_SHIFT_TABLE = {
    Mode.UPPER: {Mode.PUNCT: 0},
    Mode.LOWER: {Mode.PUNCT: 0, Mode.UPPER: 28},
    Mode.MIXED: {Mode.PUNCT: 0},
    Mode.DIGIT: {Mode.PUNCT: 0, Mode.UPPER: 15},
}


def _build_char_map() -> dict:
    char_map = {mode: [0] * 256 for mode in Mode}

    upper = char_map[Mode.UPPER]
    upper[ord(" ")] = 1
    for c in range(ord("A"), ord("Z") + 1):
        upper[c] = c - ord("A") + 2

    lower = char_map[Mode.LOWER]
    lower[ord(" ")] = 1
    for c in range(ord("a"), ord("z") + 1):
        lower[c] = c - ord("a") + 2

    digit = char_map[Mode.DIGIT]
    digit[ord(" ")] = 1
    for c in range(ord("0"), ord("9") + 1):
        digit[c] = c - ord("0") + 2
    digit[ord(",")] = 12
    digit[ord(".")] = 13

    mixed_table = [
        0, ord(" "), 1, 2, 3, 4, 5, 6, 7, 8, 9, 10,
        11, 12, 13, 27, 28, 29, 30, 31, ord("@"), ord("\\"), ord("^"),
        ord("_"), ord("`"), ord("|"), ord("~"), 127,
    ]
    for i, value in enumerate(mixed_table):
        char_map[Mode.MIXED][value] = i

    punct_table = [0, ord("\r"), 0, 0, 0, 0] + [
        ord(c) for c in "!''#$%&'()*+,-./:;<=>?[]{}"
    ]
    # The table above spells out indexes 6.. as: ! ' # $ % & ' ( ) * + , - . / : ; < = > ? [ ] { }
    punct_table = [
        0, ord("\r"), 0, 0, 0, 0, ord("!"), ord("'"), ord("#"), ord("$"), ord("%"),
        ord("&"), ord("'"), ord("("), ord(")"), ord("*"), ord("+"), ord(","),
        ord("-"), ord("."), ord("/"), ord(":"), ord(";"), ord("<"), ord("="),
        ord(">"), ord("?"), ord("["), ord("]"), ord("{"), ord("}"),
    ]
    for i, value in enumerate(punct_table):
        if value > 0:
            char_map[Mode.PUNCT][value] = i
    return char_map


_CHAR_MAP = _build_char_map()


@dataclass(frozen=True)
class SimpleToken:
    """A fixed-width code appended after ``prev``."""

    prev: Optional["Token"]
    value: int
    bit_count: int

    def append_to(self, bits: BitList, text: bytes) -> None:
        bits.add_bits(self.value, self.bit_count)

    def __str__(self) -> str:
        value = (self.value & ((1 << self.bit_count) - 1)) | (1 << self.bit_count)
        return "<" + format(value, "b")[1:] + ">"


@dataclass(frozen=True)
class BinaryShiftToken:
    """A run of raw bytes of the input written in binary shift mode."""

    prev: Optional["Token"]
    start: int
    byte_count: int

    def append_to(self, bits: BitList, text: bytes) -> None:
        count = self.byte_count
        for i in range(count):
            if i == 0 or (i == 31 and count <= 62):
                # A header precedes the first byte, and byte 31 when the run is <= 62.
                bits.add_bits(31, 5)
                if count > 62:
                    bits.add_bits(count - 31, 16)
                elif i == 0:
                    bits.add_bits(count if count < 31 else 31, 5)
                else:
                    bits.add_bits(count - 31, 5)
            bits.add_byte(text[self.start + i])

    def __str__(self) -> str:
        return f"<{self.start}::{self.start + self.byte_count - 1}>"


Token = Union[SimpleToken, BinaryShiftToken]


def _tokens_in_order(last: Optional[Token]) -> List[Token]:
    chain: List[Token] = []
    while last is not None:
        chain.append(last)
        last = last.prev
    chain.reverse()
    return chain


@dataclass(frozen=True)
class State:
    """One partial encoding: current mode, emitted tokens and their cost in bits."""

    mode: Mode = Mode.UPPER
    tokens: Optional[Token] = None
    binary_shift_byte_count: int = 0
    bit_count: int = 0

    def latch_and_append(self, mode: Mode, value: int) -> "State":
        """Latch to ``mode`` (if not already there) and append ``value``."""
        bit_count = self.bit_count
        tokens = self.tokens
        if mode != self.mode:
            latch = _LATCH_TABLE[self.mode][mode]
            tokens = SimpleToken(tokens, latch & 0xFFFF, latch >> 16)
            bit_count += latch >> 16
        tokens = SimpleToken(tokens, value, mode.bit_count)
        return State(mode, tokens, 0, bit_count + mode.bit_count)

    def shift_and_append(self, mode: Mode, value: int) -> "State":
        """Shift temporarily to ``mode`` to output a single ``value``."""
        tokens = SimpleToken(self.tokens, _SHIFT_TABLE[self.mode][mode], self.mode.bit_count)
        tokens = SimpleToken(tokens, value, 5)
        return State(self.mode, tokens, 0, self.bit_count + self.mode.bit_count + 5)

    def add_binary_shift_char(self, index: int) -> "State":
        """Output the byte at ``index`` in binary shift mode."""
        tokens = self.tokens
        mode = self.mode
        bit_count = self.bit_count
        if self.mode in (Mode.PUNCT, Mode.DIGIT):
            latch = _LATCH_TABLE[self.mode][Mode.UPPER]
            tokens = SimpleToken(tokens, latch & 0xFFFF, latch >> 16)
            bit_count += latch >> 16
            mode = Mode.UPPER
        if self.binary_shift_byte_count in (0, 31):
            delta = 18
        elif self.binary_shift_byte_count == 62:
            delta = 9
        else:
            delta = 8
        result = State(mode, tokens, self.binary_shift_byte_count + 1, bit_count + delta)
        if result.binary_shift_byte_count == 2047 + 31:
            # The run is as long as it may be; close it.
            result = result.end_binary_shift(index + 1)
        return result

    def end_binary_shift(self, index: int) -> "State":
        """Close a pending binary shift run that ends before ``index``."""
        if self.binary_shift_byte_count == 0:
            return self
        count = self.binary_shift_byte_count
        tokens = BinaryShiftToken(self.tokens, index - count, count)
        return State(self.mode, tokens, 0, self.bit_count)

    def is_better_than_or_equal_to(self, other: "State") -> bool:
        """Return True if this state is at least as good as ``other`` in every future."""
        size = self.bit_count + (_LATCH_TABLE[self.mode][other.mode] >> 16)
        if other.binary_shift_byte_count > 0 and (
            self.binary_shift_byte_count == 0
            or self.binary_shift_byte_count > other.binary_shift_byte_count
        ):
            size += 10  # cost of entering binary shift mode
        return size <= other.bit_count

    def to_bit_list(self, text: bytes) -> BitList:
        """Render the tokens of this state for ``text`` into bits."""
        closed = self.end_binary_shift(len(text))
        bits = BitList()
        for token in _tokens_in_order(closed.tokens):
            token.append_to(bits, text)
        return bits

    def __str__(self) -> str:
        tokens = " ".join(str(t) for t in _tokens_in_order(self.tokens))
        return (
            f"M:{int(self.mode)} bits={self.bit_count} "
            f"bytes={self.binary_shift_byte_count}: [{tokens}]"
        )


INITIAL_STATE = State()

_PAIR_CODES = {(13, 10): 2, (ord("."), 32): 3, (ord(","), 32): 4, (ord(":"), 32): 5}


def _simplify_states(states: Sequence[State]) -> List[State]:
    result: List[State] = []
    for new_state in states:
        add = True
        kept: List[State] = []
        for old_state in result:
            if add and old_state.is_better_than_or_equal_to(new_state):
                add = False
            if not (add and new_state.is_better_than_or_equal_to(old_state)):
                kept.append(old_state)
        result = kept + [new_state] if add else kept
    return result


def _update_state_for_char(state: State, data: bytes, index: int) -> Iterator[State]:
    ch = data[index]
    in_current = _CHAR_MAP[state.mode][ch] > 0
    no_binary: Optional[State] = None
    for mode in Mode:
        code = _CHAR_MAP[mode][ch]
        if code <= 0:
            continue
        if no_binary is None:
            no_binary = state.end_binary_shift(index)
        # Latching elsewhere when the char is in the current table never saves bits,
        # except to DIGIT, whose codes are shorter.
        if not in_current or mode == state.mode or mode == Mode.DIGIT:
            yield no_binary.latch_and_append(mode, code)
        if not in_current and mode in _SHIFT_TABLE.get(state.mode, {}):
            yield no_binary.shift_and_append(mode, code)
    if state.binary_shift_byte_count > 0 or _CHAR_MAP[state.mode][ch] == 0:
        yield state.add_binary_shift_char(index)


def _update_state_for_pair(
    state: State, data: bytes, index: int, pair_code: int
) -> Iterator[State]:
    no_binary = state.end_binary_shift(index)
    yield no_binary.latch_and_append(Mode.PUNCT, pair_code)
    if state.mode != Mode.PUNCT:
        yield no_binary.shift_and_append(Mode.PUNCT, pair_code)
    if pair_code in (3, 4):
        # Period or comma followed by space both exist in DIGIT.
        yield no_binary.latch_and_append(Mode.DIGIT, 16 - pair_code).latch_and_append(
            Mode.DIGIT, 1
        )
    if state.binary_shift_byte_count > 0:
        yield state.add_binary_shift_char(index).add_binary_shift_char(index + 1)


def high_level_encode(data: Union[bytes, bytearray, str]) -> BitList:
    """Return the shortest bit sequence encoding ``data`` (text is taken as UTF-8)."""
    text = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    states: List[State] = [INITIAL_STATE]
    index = 0
    while index < len(text):
        next_char = text[index + 1] if index + 1 < len(text) else 0
        pair_code = _PAIR_CODES.get((text[index], next_char), 0)
        if pair_code:
            candidates = [
                s
                for state in states
                for s in _update_state_for_pair(state, text, index, pair_code)
            ]
            index += 1
        else:
            candidates = [
                s for state in states for s in _update_state_for_char(state, text, index)
            ]
        states = _simplify_states(candidates)
        index += 1
    if not states:
        return BitList()
    best = min(states, key=lambda s: s.bit_count)
    return best.to_bit_list(text)