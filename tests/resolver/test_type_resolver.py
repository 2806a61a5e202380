from record_url_resolution.catalog.in_memory import InMemoryCatalog
from record_url_resolution.resolver.type_resolver import resolve_type_name
from tests.test_data import QUOTE_CODE, UNKNOWN_CODE


class RecordingCatalog(InMemoryCatalog):
    def __init__(self):
        super().__init__()
        self.queries = []

    def query_entity_metadata(self, type_code, properties):
        self.queries.append((type_code, properties))
        return super().query_entity_metadata(type_code, properties)


def test_single_match_returns_name(catalog):
    assert resolve_type_name(catalog, QUOTE_CODE) == "quote"


def test_no_match_is_none(catalog):
    assert resolve_type_name(catalog, UNKNOWN_CODE) is None


def test_ambiguous_match_is_none(catalog):
    catalog.register_entity(QUOTE_CODE, "new_quote")
    assert resolve_type_name(catalog, QUOTE_CODE) is None


def test_only_type_name_is_requested():
    cat = RecordingCatalog()
    cat.register_entity(10, "account")
    resolve_type_name(cat, 10)
    assert cat.queries == [(10, ("type_name",))]
