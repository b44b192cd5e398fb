from app.services.feed.tokens import extract_token_metadata, register_token


def test_metadata_defaults_derive_from_mint():
    metadata = extract_token_metadata({"mint": "So11111111111111111111111111111111111111112"})
    assert metadata is not None
    assert metadata.name == "So111111"
    assert metadata.symbol == "So11"
    assert metadata.decimals == 9
    assert metadata.logo_uri is None
    assert metadata.tags is None
    assert metadata.holders is None


def test_name_falls_back_to_symbol():
    metadata = extract_token_metadata({"mint": "MintA", "symbol": "ALP"})
    assert metadata.name == "ALP"
    assert metadata.symbol == "ALP"


def test_logo_resolution_order():
    assert extract_token_metadata({"mint": "M", "logoURI": "a", "icon": "b", "image": "c"}).logo_uri == "a"
    assert extract_token_metadata({"mint": "M", "icon": "b", "image": "c"}).logo_uri == "b"
    assert extract_token_metadata({"mint": "M", "image": "c"}).logo_uri == "c"


def test_pass_through_fields_are_copied_when_well_formed():
    metadata = extract_token_metadata(
        {"mint": "M", "tags": ["verified", 3], "organicScore": 91.2, "marketCap": 1e6, "holders": 40}
    )
    assert metadata.tags == ["verified"]
    assert metadata.organic_score == 91.2
    assert metadata.market_cap == 1e6
    assert metadata.holders == 40


def test_malformed_pass_through_fields_are_dropped():
    metadata = extract_token_metadata({"mint": "M", "organicScore": "high", "holders": "many", "tags": "x"})
    assert metadata.organic_score is None
    assert metadata.holders is None
    assert metadata.tags is None


def test_missing_mint_yields_no_metadata():
    assert extract_token_metadata({"name": "Orphan"}) is None
    assert extract_token_metadata({"mint": "   "}) is None


def test_register_token_first_write_wins():
    index = {}
    first = extract_token_metadata({"mint": "M", "name": "First"})
    second = extract_token_metadata({"mint": "M", "name": "Second"})
    assert register_token(index, first) is True
    assert register_token(index, second) is False
    assert index["M"].name == "First"


def test_oversized_pass_through_numbers_are_dropped():
    metadata = extract_token_metadata(
        {"mint": "M", "organicScore": 10**400, "marketCap": 10**400, "holders": 10**400}
    )
    assert metadata is not None
    assert metadata.organic_score is None
    assert metadata.market_cap is None
    assert metadata.holders is None
