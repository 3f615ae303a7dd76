import json

import pytest


def _record(**overrides):
    record = {
        "origin": "VVO",
        "origin_name": "Владивосток",
        "destination": "TLV",
        "destination_name": "Тель-Авив",
        "departure_date": "12.05.18",
        "departure_time": "16:20",
        "arrival_date": "12.05.18",
        "arrival_time": "22:10",
        "carrier": "TK",
        "stops": 3,
        "price": 12400,
    }
    record.update(overrides)
    return record


@pytest.fixture
def make_record():
    return _record


@pytest.fixture
def write_tickets(tmp_path):
    def _write(records, name="tickets.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"tickets": records}, ensure_ascii=False), encoding="utf-8")
        return path
    return _write
