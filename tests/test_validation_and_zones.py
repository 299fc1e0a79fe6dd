"""Tests for the validation gate and zone emission."""

import re

import pytest

from linkifier.core.matchers import LinkMatcher
from linkifier.core.row_scanner import LinkOccurrence
from linkifier.core.validation import ValidationGate
from linkifier.core.zones import MouseZone, ZoneEmitter


class Generation:
    def __init__(self):
        self.value = 0

    def __call__(self):
        return self.value


def _occurrence(matcher, column=6, text="http://example.com", row=2):
    return LinkOccurrence(matcher=matcher, column=column, text=text, row=row)


class TestValidationGate:
    def test_no_callback_accepts_immediately(self):
        matcher = LinkMatcher(id=1, regex=re.compile("x"))
        accepted = []
        ValidationGate(Generation()).submit(_occurrence(matcher), "row", accepted.append)
        assert len(accepted) == 1

    def test_callback_receives_row_text(self):
        seen = []
        matcher = LinkMatcher(id=1, regex=re.compile("x"), validation_callback=lambda text, done: seen.append(text))
        ValidationGate(Generation()).submit(_occurrence(matcher), "the whole row", lambda occ: None)
        assert seen == ["the whole row"]

    @pytest.mark.parametrize("verdict, expected", [(True, 1), (False, 0)])
    def test_synchronous_verdict(self, verdict, expected):
        matcher = LinkMatcher(id=1, regex=re.compile("x"), validation_callback=lambda text, done: done(verdict))
        accepted = []
        ValidationGate(Generation()).submit(_occurrence(matcher), "row", accepted.append)
        assert len(accepted) == expected

    def test_late_verdict_after_new_generation_is_discarded(self):
        pending = []
        matcher = LinkMatcher(id=1, regex=re.compile("x"), validation_callback=lambda text, done: pending.append(done))
        generation = Generation()
        accepted = []
        ValidationGate(generation).submit(_occurrence(matcher), "row", accepted.append)

        generation.value += 1
        pending[0](True)
        assert accepted == []

    def test_late_verdict_in_same_generation_is_accepted(self):
        pending = []
        matcher = LinkMatcher(id=1, regex=re.compile("x"), validation_callback=lambda text, done: pending.append(done))
        accepted = []
        ValidationGate(Generation()).submit(_occurrence(matcher), "row", accepted.append)

        pending[0](True)
        pending[0](True)
        assert len(accepted) == 1

    def test_callback_errors_propagate(self):
        def broken(text, done):
            raise RuntimeError("validator exploded")

        matcher = LinkMatcher(id=1, regex=re.compile("x"), validation_callback=broken)
        with pytest.raises(RuntimeError, match="validator exploded"):
            ValidationGate(Generation()).submit(_occurrence(matcher), "row", lambda occ: None)


class TestZoneEmitter:
    def test_zone_span_is_one_based(self, sink, opened):
        matcher = LinkMatcher(id=0, regex=re.compile("x"))
        zone = ZoneEmitter(sink, opened.append).emit(_occurrence(matcher))
        assert (zone.x1, zone.x2, zone.y) == (7, 25, 3)
        assert sink.zones == [zone]

    def test_click_without_handler_opens_externally(self, sink, opened):
        matcher = LinkMatcher(id=0, regex=re.compile("x"))
        zone = ZoneEmitter(sink, opened.append).emit(_occurrence(matcher))
        zone.click_callback(object())
        assert opened == ["http://example.com"]

    def test_click_with_handler(self, sink, opened):
        calls = []
        matcher = LinkMatcher(id=1, regex=re.compile("x"), handler=lambda event, uri: calls.append((event, uri)))
        zone = ZoneEmitter(sink, opened.append).emit(_occurrence(matcher, text="#12", column=0))
        zone.click_callback("evt")
        assert calls == [("evt", "#12")]
        assert opened == []

    def test_handler_replaced_after_emission_is_used(self, sink, opened):
        matcher = LinkMatcher(id=0, regex=re.compile("x"))
        zone = ZoneEmitter(sink, opened.append).emit(_occurrence(matcher))
        calls = []
        matcher.handler = lambda event, uri: calls.append(uri)
        zone.click_callback(None)
        assert calls == ["http://example.com"]
        assert opened == []

    def test_hover_callbacks(self, sink, opened):
        events = []
        matcher = LinkMatcher(
            id=1,
            regex=re.compile("x"),
            handler=lambda e, u: None,
            hover_start_callback=lambda event, uri: events.append(("start", event, uri)),
            hover_end_callback=lambda: events.append(("end",)),
        )
        zone = ZoneEmitter(sink, opened.append).emit(_occurrence(matcher, text="abc"))
        zone.hover_callback("move")
        zone.leave_callback()
        assert events == [("start", "move", "abc"), ("end",)]

    def test_hover_callbacks_are_optional(self, sink, opened):
        matcher = LinkMatcher(id=1, regex=re.compile("x"), handler=lambda e, u: None)
        zone = ZoneEmitter(sink, opened.append).emit(_occurrence(matcher))
        zone.hover_callback(None)
        zone.leave_callback()

    def test_contains(self):
        zone = MouseZone(3, 6, 2, lambda e: None, lambda e: None, lambda: None)
        assert zone.contains(3, 2)
        assert zone.contains(5, 2)
        assert not zone.contains(6, 2)
        assert not zone.contains(3, 1)
