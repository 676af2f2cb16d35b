"""Consistent hashing of integer keys onto machines placed on a ring."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import chain

NODE_CAPACITY = 2 << 8


def machine_hash(ip: str) -> int:
    """Ring slot of a machine: its first byte shifted left by two, modulo the ring size."""
    if not ip:
        raise ValueError("key is empty")
    return (ip.encode()[0] << 2) % NODE_CAPACITY


def data_hash(key: int) -> int:
    """Ring slot of a data key: its magnitude modulo the ring size."""
    return abs(key) % NODE_CAPACITY


@dataclass(eq=False)
class Machine:
    """A machine on the ring and the entries it stores."""

    ip: str
    data: dict[int, int] = field(default_factory=dict)


class ConsistentHash:
    """Ring of machines; a key belongs to the first machine at or after its slot."""

    def __init__(self, *args: Machine) -> None:
        if not args:
            raise ValueError("machines is empty")
        self._ring: list[Machine | None] = [None] * NODE_CAPACITY
        for machine in args:
            self._ring[machine_hash(machine.ip)] = machine

    def _successor(self, start: int) -> Machine:
        for slot in chain(range(start, NODE_CAPACITY), range(start)):
            machine = self._ring[slot]
            if machine is not None:
                return machine
        raise LookupError("no machine on the ring")

    def _owner(self, key: int) -> Machine:
        return self._successor(data_hash(key))

    def add_machine(self, machine: Machine) -> None:
        """Place *machine* on the ring and move over the keys it now owns."""
        slot = machine_hash(machine.ip)
        if self._ring[slot] is not None:
            raise ValueError(f"hash collision: machine {machine.ip!r} already present")
        self._ring[slot] = machine
        successor = self._successor((slot + 1) % NODE_CAPACITY)
        if successor is machine:
            return
        for key in [k for k in successor.data if self._owner(k) is machine]:
            machine.data[key] = successor.data.pop(key)

    def add(self, key: int, value: int) -> None:
        self._owner(key).data[key] = value

    def get(self, key: int) -> int:
        data = self._owner(key).data
        if key not in data:
            raise KeyError(key)
        return data[key]

    def delete(self, key: int) -> None:
        data = self._owner(key).data
        if key not in data:
            raise KeyError(key)
        del data[key]