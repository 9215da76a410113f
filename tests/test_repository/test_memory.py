"""Tests propres au dépôt d'adresses en mémoire."""

from uuid import uuid4

from address_converter.models.address import Address
from address_converter.repository.connectors.memory import MemoryAddressRepository


def test_len_and_contains(
    memory_repository: MemoryAddressRepository, stored_address: Address
) -> None:
    assert len(memory_repository) == 0
    memory_repository.save(stored_address)
    assert len(memory_repository) == 1
    assert stored_address.id in memory_repository
    assert str(stored_address.id) in memory_repository
    assert uuid4() not in memory_repository
    assert "pas-un-uuid" not in memory_repository
    assert 42 not in memory_repository


def test_instances_are_isolated(stored_address: Address) -> None:
    first = MemoryAddressRepository()
    second = MemoryAddressRepository()
    first.save(stored_address)
    assert second.list_ids() == []
