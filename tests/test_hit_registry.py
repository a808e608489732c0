"""Tests for the per-frame hit registry."""
from core.hit_registry import HitRegistry, KIND_MISSION, KIND_PLANET


class TestHitRegistry:
    def test_miss_returns_none(self):
        reg = HitRegistry()
        reg.register(KIND_PLANET, "Earth", 100, 100, 10)
        assert reg.pick(200, 200) is None

    def test_inside_and_on_edge(self):
        reg = HitRegistry()
        reg.register(KIND_PLANET, "Earth", 100, 100, 10)
        assert reg.pick(105, 105).id == "Earth"
        assert reg.pick(110, 100).id == "Earth"
        assert reg.pick(110.5, 100) is None

    def test_last_registered_wins(self):
        reg = HitRegistry()
        reg.register(KIND_PLANET, "Earth", 100, 100, 20)
        reg.register(KIND_MISSION, "M-1", 105, 100, 14, payload="card")
        hit = reg.pick(104, 100)
        assert (hit.kind, hit.id, hit.payload) == (KIND_MISSION, "M-1", "card")
        # Only the older target covers this point
        assert reg.pick(85, 100).id == "Earth"

    def test_clear(self):
        reg = HitRegistry()
        reg.register(KIND_PLANET, "Earth", 0, 0, 10)
        assert len(reg) == 1
        reg.clear()
        assert len(reg) == 0
        assert reg.pick(0, 0) is None
