from assets import (AssetRow, LiabilityRow, ASSET_TYPES, approx_total, validate_rows,
                    assets_form_data, normalize_type)


def test_approx_total_none_without_amounts():
    assert approx_total([AssetRow(name="Bank")], [LiabilityRow(name="Card")]) is None


def test_approx_total_in_inr():
    totals = approx_total(
        [AssetRow(name="Brokerage US", currency="US", total=100)],
        [LiabilityRow(name="Card", currency="India", total=1000)],
    )
    assert totals == {"net_inr": 7300, "assets_inr": 8300, "liabilities_inr": 1000}


def test_validate_rows():
    assert validate_rows([], []) == ""
    assert validate_rows([AssetRow(name="ab", total=5)], []) == "Every asset name must be at least 3 characters."
    assert validate_rows([AssetRow(name="Savings", total=5)], [LiabilityRow(name="x", total=1)]) == \
        "Every liability name must be at least 3 characters."
    assert validate_rows([AssetRow(name="Savings", total=5)], [LiabilityRow(name="Loan", total=10)]) == \
        "Net value (assets minus liabilities) must be greater than 0."
    assert validate_rows([AssetRow(name="Savings", total=50)], [LiabilityRow(name="Loan", total=10)]) == ""


def test_form_data_drops_empty_rows():
    data = assets_form_data(
        "India",
        [AssetRow(name=" Bank ", total=10), AssetRow(), AssetRow(type="other", label="Gold", comment=" old ")],
        [LiabilityRow(), LiabilityRow(name="Car", total=3)],
    )
    assert data["currency"] == "India"
    assert data["accounts"] == [
        {"type": "savings", "currency": "India", "name": "Bank", "total": 10.0},
        {"type": "other", "currency": "India", "label": "Gold", "comment": "old"},
    ]
    assert data["liabilities"] == [{"type": "personal_loan", "currency": "India", "name": "Car", "total": 3.0}]


def test_normalize_type():
    assert normalize_type("crypto", ASSET_TYPES, "savings") == "crypto"
    assert normalize_type("stamps", ASSET_TYPES, "savings") == "savings"
