"""Day 16: decode the hierarchical packets of a BITS transmission."""

from __future__ import annotations

import math
import re
import sys
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

_HEX = re.compile(r"[0-9a-fA-F]*")

VERSION_BITS = 3
TYPE_BITS = 3
GROUP_BITS = 5
BIT_COUNT_BITS = 15
PACKET_COUNT_BITS = 11


class TypeId(IntEnum):
    SUM = 0
    PRODUCT = 1
    MIN = 2
    MAX = 3
    LITERAL = 4
    GT = 5
    LT = 6
    EQ = 7


class LengthType(IntEnum):
    """How an operator packet says how much it contains."""

    BITS = 0
    PACKETS = 1


@dataclass
class Packet:
    """A literal value packet, or an operator packet holding sub-packets."""

    version: int
    type_id: TypeId
    value: int = 0
    length_type: LengthType | None = None
    packets: list[Packet] = field(default_factory=list)

    def version_sum(self) -> int:
        """Sum of this packet's version and those of every nested packet."""
        return self.version + sum(packet.version_sum() for packet in self.packets)

    def evaluate(self) -> int:
        """Value of the expression this packet encodes."""
        if self.type_id is TypeId.LITERAL:
            return self.value

        values = [packet.evaluate() for packet in self.packets]
        match self.type_id:
            case TypeId.SUM:
                return sum(values)
            case TypeId.PRODUCT:
                return math.prod(values)
            case TypeId.MIN | TypeId.MAX:
                if not values:
                    raise ValueError(f"{self.type_id.name} packet has no sub-packets")
                return min(values) if self.type_id is TypeId.MIN else max(values)
            case TypeId.GT | TypeId.LT | TypeId.EQ:
                if len(values) < 2:
                    raise ValueError(f"{self.type_id.name} packet needs two sub-packets")
                first, second = values[0], values[1]
                if self.type_id is TypeId.GT:
                    return int(first > second)
                if self.type_id is TypeId.LT:
                    return int(first < second)
                return int(first == second)
        return 0


def hex_to_binary(hex_text: str) -> str:
    """Expand hexadecimal text into a string of bits, eight per byte."""
    if not _HEX.fullmatch(hex_text):
        raise ValueError(f"invalid hexadecimal text: {hex_text!r}")
    return "".join(f"{byte:08b}" for byte in bytes.fromhex(hex_text))


def _take(binary: str, count: int) -> tuple[str, str]:
    if count > len(binary):
        raise ValueError(f"packet truncated: needed {count} bits, have {len(binary)}")
    return binary[:count], binary[count:]


def _to_int(bits: str) -> int:
    if not bits:
        raise ValueError("no bits to read as a number")
    return int(bits, 2)


def _parse_literal(binary: str) -> tuple[int, str]:
    groups = []
    rest = binary
    while True:
        group, rest = _take(rest, GROUP_BITS)
        groups.append(group[1:])
        # A leading 0 marks the last group.
        if group[0] == "0":
            break
    return _to_int("".join(groups)), rest


def _parse_by_bit_count(packet: Packet, binary: str) -> str:
    head, rest = _take(binary, BIT_COUNT_BITS)
    body, tail = _take(rest, _to_int(head))
    # Trailing zero padding inside the body is discarded.
    while body.strip("0"):
        try:
            sub, body = parse_packet(body)
        except ValueError:
            break
        packet.packets.append(sub)
    return tail


def _parse_by_packet_count(packet: Packet, binary: str) -> str:
    head, tail = _take(binary, PACKET_COUNT_BITS)
    for _ in range(_to_int(head)):
        try:
            sub, tail = parse_packet(tail)
        except ValueError:
            break
        packet.packets.append(sub)
    return tail


def parse_packet(binary: str) -> tuple[Packet, str]:
    """Parse one packet from the front of a bit string; return it and the unread bits."""
    version_bits, rest = _take(binary, VERSION_BITS)
    type_bits, rest = _take(rest, TYPE_BITS)
    packet = Packet(version=_to_int(version_bits), type_id=TypeId(_to_int(type_bits)))

    if packet.type_id is TypeId.LITERAL:
        packet.value, rest = _parse_literal(rest)
        return packet, rest

    mode, rest = _take(rest, 1)
    if mode == "0":
        packet.length_type = LengthType.BITS
        rest = _parse_by_bit_count(packet, rest)
    else:
        packet.length_type = LengthType.PACKETS
        rest = _parse_by_packet_count(packet, rest)
    return packet, rest


def _outer_packet(content: str) -> Packet:
    packet, _ = parse_packet(hex_to_binary(content.strip()))
    return packet


def part_one(content: str) -> int:
    """Sum of the version numbers of every packet in the transmission."""
    return _outer_packet(content).version_sum()


def part_two(content: str) -> int:
    """Value of the expression the transmission encodes."""
    return _outer_packet(content).evaluate()


def main(argv: Sequence[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    filename = args[0] if args else "input.txt"
    content = Path(filename).read_text()

    start = time.perf_counter()
    try:
        answer = part_one(content)
    except ValueError as err:
        print("failed to parse PartOne", err)
        return
    print(f"Part One: {answer} ({time.perf_counter() - start:.6f}s) ")

    start = time.perf_counter()
    try:
        answer2 = part_two(content)
    except ValueError as err:
        print("failed to parse PartTwo", err)
        return
    print(f"Part Two: {answer2} ({time.perf_counter() - start:.6f}s) ")


if __name__ == "__main__":
    main()