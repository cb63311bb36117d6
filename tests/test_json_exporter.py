"""Tests for the availability JSON exporter."""

import json
from pathlib import Path

from adapters.json_exporter import export_availability_json
from core.domain.models import AvailabilityIndex, LookupResult


def test_export_writes_pretty_json_in_tld_order(tmp_path: Path) -> None:
    index = AvailabilityIndex.for_tlds([".com", ".ai"])
    index.record(".ai", LookupResult(domain="apple.ai", available=True, price=2_000_000, period=1))

    out = export_availability_json(index=index, output_path=tmp_path / "nested" / "out.json")

    text = out.read_text(encoding="utf-8")
    assert text == '{\n  ".com": [],\n  ".ai": [\n    "apple.ai (USD 2.00/1y)"\n  ]\n}\n'
    assert list(json.loads(text)) == [".com", ".ai"]


def test_export_overwrites_existing_file(tmp_path: Path) -> None:
    out = tmp_path / "out.json"
    out.write_text("stale content that is longer than the new payload", encoding="utf-8")

    export_availability_json(index=AvailabilityIndex.for_tlds([".io"]), output_path=out)

    assert json.loads(out.read_text(encoding="utf-8")) == {".io": []}
