#!/usr/bin/env python3
"""
Quick Start - A reloadable program cache built from composed stores.

Demonstrates:
- Looking up missing values once, even under concurrent requests
- Nesting looked-up caches (program -> step)
- Clearing every cache at once with a cascading container
- Routing keys to a diffing store

Usage:
    python examples/quick_start.py
"""

import asyncio

from strata.store import Cascading, DiffStore, MemoryStore, MissLookup, PatternProxy


async def load_program(program_id):
    print(f"  (loading program {program_id})")
    await asyncio.sleep(0.1)
    return {"id": program_id, "steps": 3}


def step_cache(program_id):
    async def load_step(step):
        print(f"  (loading {program_id} step {step})")
        return f"<section id='{program_id}-{step}'></section>"

    return MemoryStore().use(MissLookup, load_step)


async def main():
    programs = MemoryStore().use(MissLookup, load_program)
    steps = MemoryStore().use(MissLookup, step_cache)

    cache = MemoryStore().use(Cascading)
    await cache.add("program", programs)
    await cache.add("step_html", steps)

    print("Three concurrent requests, one load:")
    results = await asyncio.gather(*(programs.get("auto") for _ in range(3)))
    print(f"  {results[0]}")

    print("Step HTML:")
    auto_steps = await steps.get("auto")
    print(f"  {await auto_steps.get('1')}")
    print(f"  {await auto_steps.get('1')}  (cached)")

    print("Reload:")
    print(f"  cleared: {await cache.clear()}")
    await programs.get("auto")

    print("Classification diffs:")
    classes = DiffStore()
    bucket = MemoryStore()
    data = MemoryStore().use(PatternProxy, [(r"^c:(.*)$", classes), (r".", bucket)])

    await data.add("c:eligible", [True, True, False])
    await data.clear()
    await data.add("c:eligible", [True, False, False])
    print(f"  c:eligible changed: {await data.get('c:eligible')}")


if __name__ == "__main__":
    asyncio.run(main())
