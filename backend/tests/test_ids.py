"""Identifier format and generator configuration."""
import re

import pytest

from inbound_wms.core.ids import EntityKind, IdGenerator


class TestIdGenerator:

    @pytest.mark.parametrize(
        "method, prefix",
        [
            ("new_asn_id", "ASN"),
            ("new_asn_line_item_id", "ASNL"),
            ("new_receipt_id", "RCP"),
            ("new_receipt_line_id", "RCPL"),
            ("new_putaway_task_id", "PTA"),
        ],
    )
    def test_prefix_and_suffix(self, method, prefix):
        value = getattr(IdGenerator(), method)()
        assert re.fullmatch(rf"{prefix}-[A-Z0-9]{{10}}", value)

    def test_suffix_length_is_configurable(self):
        value = IdGenerator(suffix_length=6).new(EntityKind.RECEIPT)
        assert re.fullmatch(r"RCP-[A-Z0-9]{6}", value)

    def test_rejects_short_suffix(self):
        with pytest.raises(ValueError):
            IdGenerator(suffix_length=3)

    def test_ids_do_not_repeat(self):
        ids = IdGenerator()
        generated = {ids.new_putaway_task_id() for _ in range(2000)}
        assert len(generated) == 2000
