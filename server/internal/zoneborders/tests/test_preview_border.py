"""
Tests for the border preview script.
"""

import json
import sys
from pathlib import Path

# Add server and scripts directories to path
server_dir = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(server_dir))
sys.path.insert(0, str(server_dir / "scripts"))

import pytest
import preview_border


def test_preview_zones(tmp_path, capsys):
    """Test a list of zones is summarized"""
    zones_file = tmp_path / "zones.json"
    zones_file.write_text(json.dumps([
        {"name": "arena", "shape": "Rectangle", "minX": 0, "maxX": 10, "minZ": 0, "maxZ": 10},
        {"name": "pit", "shape": "Circle", "radius": 5},
    ]))

    assert preview_border.main([str(zones_file), "--spacing", "1.0"]) == 0

    out = capsys.readouterr().out
    assert "arena: 40 nodes" in out
    assert "inside_corner=4" in out
    assert "pit: 31 nodes" in out


def test_preview_single_zone_object(tmp_path):
    """Test a single zone object is accepted"""
    zones_file = tmp_path / "zone.json"
    zones_file.write_text(json.dumps({"shape": "Box", "radius": 3}))

    assert preview_border.main([str(zones_file)]) == 0


def test_preview_missing_file(tmp_path, capsys):
    """Test a missing file fails"""
    assert preview_border.main([str(tmp_path / "missing.json")]) == 1
    assert "File not found" in capsys.readouterr().out


def test_preview_invalid_json(tmp_path, capsys):
    """Test invalid JSON fails"""
    zones_file = tmp_path / "zones.json"
    zones_file.write_text("{not json")

    assert preview_border.main([str(zones_file)]) == 1
    assert "Invalid JSON" in capsys.readouterr().out


def test_preview_invalid_zone(tmp_path, capsys):
    """Test a zone with non-numeric fields fails"""
    zones_file = tmp_path / "zones.json"
    zones_file.write_text(json.dumps([{"name": "bad", "shape": "Circle", "radius": "wide"}]))

    assert preview_border.main([str(zones_file)]) == 1
    assert "bad" in capsys.readouterr().out
