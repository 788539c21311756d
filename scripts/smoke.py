# scripts/smoke.py
"""
Smoke Test Script for the genparse transforms.

Usage
-----
1. Run every transform on the built-in sample completion:
    $ python scripts/smoke.py

2. Run them on a saved completion:
    $ python scripts/smoke.py --file samples/completion.md -d tsx -d css
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from genparse import edit, extract, parse

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
DEFAULT_TEXT = """Here is the page you asked for:
```tsx
import React from 'react';
import HeroSection from '@/components/sections/HeroSection';
import Dashboard from '@/components/views/Dashboard';

export default function Page() {
  // @need:api:fetch the signed-in user
  return (
    <main>
      <HeroSection />
      <Dashboard />
    </main>
  );
}
```
```yaml
title: Landing
sections: [HeroSection]
```
"""


async def run(text: str, delimiters: list[str]) -> None:
    """Execute the smoke test workflow."""
    blocks = await extract.backticks_multiple(text, delimiters)
    print(f"\n📦 Blocks: {sorted(blocks) if blocks else None}")
    if not blocks:
        return

    code = blocks.get("tsx", "")
    needs = await extract.decorators(code)
    print(f"🔎 @need markers: {[(n.line_number, n.type, n.description) for n in needs]}")

    page = await edit.gen_ui(code)
    print(f"🧩 GenUI ids: {page.ids.model_dump()}")
    print(page.text)

    if "yaml" in blocks:
        doc = await parse.yaml({"text": blocks["yaml"]})
        print(f"\n📝 YAML: {json.dumps(doc, indent=2)}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run genparse Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to a saved completion")
    parser.add_argument(
        "--delimiter", "-d", action="append", help="Fence label (repeatable, in order)"
    )
    args = parser.parse_args()

    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            return
        text = input_path.read_text(encoding="utf-8")
    else:
        print("📝 Using default sample completion (No --file provided)")
        text = DEFAULT_TEXT

    asyncio.run(run(text, args.delimiter or ["tsx", "yaml"]))


if __name__ == "__main__":
    main()
