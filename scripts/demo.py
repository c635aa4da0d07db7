#!/usr/bin/env python3
"""
Demo script for the character catalog.

Runs the cache-first flow against the live Rick and Morty API with an
in-memory store: the first listing goes to the network, later lookups
are served from the cache.
"""

import asyncio
import time

from character_catalog.config import configure_logging
from character_catalog.entities import Failure
from character_catalog.repositories import InMemoryCharacterStore, RickAndMortyApiSource
from character_catalog.services import CharacterService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


async def demo_read_through(service: CharacterService) -> None:
    """Demonstrate a miss followed by cache hits."""
    print_section("Cache-first read-through")

    for attempt in ("cold", "warm"):
        start = time.time()
        result = await service.get_characters()
        elapsed_ms = (time.time() - start) * 1000
        if isinstance(result, Failure):
            print(f"❌ {attempt}: {result.error.message}")
            return
        print(f"✓ {attempt}: {len(result.value)} characters in {elapsed_ms:.1f}ms")

    result = await service.get_character_by_id(1)
    if not isinstance(result, Failure):
        character = result.value
        print(f"\n🔍 #{character.id} {character.name} ({character.species}, {character.status})")
        print(f"   origin: {character.origin.name}  episodes: {character.episode_count}")


async def demo_failures(service: CharacterService) -> None:
    """Demonstrate how failures surface."""
    print_section("Failures")

    for character_id in (0, 999_999):
        result = await service.get_character_by_id(character_id)
        if isinstance(result, Failure):
            print(f"  id={character_id}: {type(result.error).__name__}: {result.error.message}")


async def main() -> None:
    configure_logging("WARNING")
    service = CharacterService.create(
        store=InMemoryCharacterStore(),
        source=RickAndMortyApiSource.create(),
    )
    try:
        await demo_read_through(service)
        await demo_failures(service)
        print_section("Stats")
        print(service.get_stats())
    finally:
        await service.close()


if __name__ == "__main__":
    asyncio.run(main())
