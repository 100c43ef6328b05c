#!/usr/bin/env python3
"""
Preview border nodes for zone definitions in a JSON file.

The file holds either a single zone object or a list of zone objects, e.g.
    [{"name": "arena", "shape": "Rectangle", "minX": 0, "maxX": 10, "minZ": 0, "maxZ": 10}]

Usage:
    python preview_border.py zones.json [--spacing 1.0]
"""
import argparse
import json
import sys
from pathlib import Path

# Add server directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from internal.zoneborders import borders
from internal.zoneborders import zones


def load_zones(path: Path):
    """Load zone definitions, returning None (after reporting) on failure."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        print(f"✗ Invalid JSON: {e}")
        return None
    except FileNotFoundError:
        print(f"✗ File not found: {path}")
        return None

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        print("✗ Expected a zone object or a list of zone objects")
        return None
    return data


def preview_zone(entry, index: int, spacing: float) -> bool:
    name = entry.get('name', f'zone[{index}]') if isinstance(entry, dict) else f'zone[{index}]'
    if not isinstance(entry, dict):
        print(f"✗ {name}: not an object")
        return False

    try:
        zone = zones.ZoneDescription.from_dict(entry)
    except ValueError as e:
        print(f"✗ {name}: {e}")
        return False

    nodes = borders.get_zone_border_nodes(zone, spacing)
    if not nodes:
        print(f"⚠ {name}: no border nodes (shape={zone.shape})")
        return True

    counts = borders.summarize_nodes(nodes)
    summary = ', '.join(f"{k}={v}" for k, v in counts.items())
    print(f"✓ {name}: {len(nodes)} nodes (shape={zone.shape}) {summary}")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Preview zone border nodes")
    parser.add_argument('zones_file', type=Path)
    parser.add_argument('--spacing', type=float, default=1.0)
    args = parser.parse_args(argv)

    entries = load_zones(args.zones_file)
    if entries is None:
        return 1

    success = True
    for i, entry in enumerate(entries):
        success &= preview_zone(entry, i, args.spacing)

    if success:
        print("\n✓ All zones previewed")
        return 0
    print("\n✗ Some zones could not be previewed")
    return 1


if __name__ == '__main__':
    sys.exit(main())
