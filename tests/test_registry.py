"""
Tests for AdapterRegistry.
"""

import pytest

from soulsreq.adapters import BLOODBORNE, DARK_SOULS_3, GAMES
from soulsreq.config import Settings
from soulsreq.errors import DataUnavailableError, UnknownGameError
from soulsreq.models import Usability
from soulsreq.providers import DirectoryDatasetProvider, PackageDatasetProvider
from soulsreq.registry import AdapterRegistry, default_registry
from soulsreq.usability import check_usability


class FakeProvider:
    """In-memory provider recording requested datasets."""

    def __init__(self, datasets: dict[str, list] | None = None, error: Exception | None = None):
        self.datasets = datasets or {}
        self.error = error
        self.requested: list[str] = []

    async def fetch(self, dataset: str) -> list[dict]:
        self.requested.append(dataset)
        if self.error is not None:
            raise self.error
        if dataset not in self.datasets:
            raise DataUnavailableError(dataset, "not in fake provider")
        return self.datasets[dataset]


class TestLookup:
    """Test adapter lookup."""

    def test_order_is_registration_order(self):
        registry = AdapterRegistry(GAMES, FakeProvider())
        assert registry.ids() == ["DSR", "DS2", "DS3", "BB", "ER"]
        assert [a.id for a in registry] == registry.ids()
        assert len(registry) == 5

    def test_custom_order(self):
        registry = AdapterRegistry([BLOODBORNE, DARK_SOULS_3], FakeProvider())
        assert registry.ids() == ["BB", "DS3"]

    def test_get(self):
        registry = AdapterRegistry()
        assert registry.get("BB") is BLOODBORNE
        assert "BB" in registry
        assert "XX" not in registry

    def test_unknown_game(self):
        registry = AdapterRegistry()
        with pytest.raises(UnknownGameError) as exc_info:
            registry.get("SEKIRO")
        assert exc_info.value.game_id == "SEKIRO"
        assert "Known games: DSR, DS2, DS3, BB, ER" in str(exc_info.value)

    def test_unknown_game_is_key_error(self):
        with pytest.raises(KeyError):
            AdapterRegistry().get("SEKIRO")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate game id: BB"):
            AdapterRegistry([BLOODBORNE, BLOODBORNE])

    def test_default_provider(self):
        assert isinstance(AdapterRegistry().provider, PackageDatasetProvider)


class TestLoading:
    """Test per-adapter dataset loading."""

    @pytest.mark.anyio
    async def test_load_raw_uses_adapter_dataset(self):
        provider = FakeProvider({"bloodborne": [{"name": "Saw Cleaver"}]})
        registry = AdapterRegistry(GAMES, provider)

        records = await registry.load_raw("BB")

        assert records == [{"name": "Saw Cleaver"}]
        assert provider.requested == ["bloodborne"]

    @pytest.mark.anyio
    async def test_loader_for(self):
        provider = FakeProvider({"eldenring": [{"name": "Dagger"}]})
        registry = AdapterRegistry(GAMES, provider)

        load = registry.loader_for("ER")
        assert await load() == [{"name": "Dagger"}]

    def test_loader_for_unknown_game(self):
        with pytest.raises(UnknownGameError):
            AdapterRegistry(GAMES, FakeProvider()).loader_for("XX")

    @pytest.mark.anyio
    async def test_provider_failure_surfaces(self):
        registry = AdapterRegistry(GAMES, FakeProvider(error=DataUnavailableError("ds3", "disk on fire")))
        with pytest.raises(DataUnavailableError) as exc_info:
            await registry.load_raw("DS3")
        assert "disk on fire" in str(exc_info.value)

    @pytest.mark.anyio
    async def test_untyped_provider_error_wrapped(self):
        error = OSError("disk gone")
        registry = AdapterRegistry(GAMES, FakeProvider(error=error))

        with pytest.raises(DataUnavailableError) as exc_info:
            await registry.load_raw("DSR")

        assert exc_info.value.dataset == "dsr"
        assert "disk gone" in str(exc_info.value)
        assert exc_info.value.__cause__ is error

    @pytest.mark.anyio
    async def test_undecodable_directory_dataset(self, tmp_path):
        (tmp_path / "dsr.json").write_bytes(b"\xff\xfe")
        registry = AdapterRegistry(GAMES, DirectoryDatasetProvider(tmp_path))

        with pytest.raises(DataUnavailableError):
            await registry.load_weapons("DSR")

    @pytest.mark.anyio
    async def test_empty_dataset_is_unavailable(self):
        registry = AdapterRegistry(GAMES, FakeProvider({"ds3": []}))
        with pytest.raises(DataUnavailableError):
            await registry.load_weapons("DS3")

    @pytest.mark.anyio
    async def test_load_weapons_normalizes_in_order(self):
        provider = FakeProvider({
            "dsr": [
                {"name": "Zweihander", "type": "Ultra Greatsword", "req": {"str": 24, "dex": 10}},
                {"name": "Talisman", "type": "Catalyst", "req": {"fai": 10}, "twoHandRule": False},
            ]
        })
        registry = AdapterRegistry(GAMES, provider)

        weapons = await registry.load_weapons("DSR")

        assert [w.name for w in weapons] == ["Zweihander", "Talisman"]
        assert weapons[1].requirements["fth"] == 10
        assert weapons[1].two_hand_rule is False

    @pytest.mark.anyio
    async def test_bundled_end_to_end(self):
        """Knight (11 STR) two-hands the bundled DSR Claymore but not the Zweihander."""
        registry = AdapterRegistry()
        adapter = registry.get("DSR")
        weapons = {w.id: w for w in await registry.load_weapons("DSR")}
        knight = {"str": 11, "dex": 11, "int": 9, "fth": 11}

        assert check_usability(weapons["longsword"], knight, adapter) == Usability.ONE_HANDED
        assert check_usability(weapons["claymore"], knight, adapter) == Usability.TWO_HANDED
        assert check_usability(weapons["zweihander"], knight, adapter) == Usability.NOT_USABLE
        assert check_usability(weapons["talisman"], knight, adapter) == Usability.ONE_HANDED


class TestDefaultRegistry:
    """Test building the registry from settings."""

    def test_directory_provider(self, tmp_path):
        registry = default_registry(Settings(data_dir=tmp_path))
        assert isinstance(registry.provider, DirectoryDatasetProvider)
        assert registry.ids() == [g.id for g in GAMES]
