from dataclasses import dataclass
from typing import Optional

from currency import convert_to_inr
from validation import validate_name

ASSET_TYPES = {
    "savings": "Savings",
    "brokerage": "Brokerage",
    "property": "Property",
    "crypto": "Crypto",
    "other": "Other",
}

LIABILITY_TYPES = {
    "personal_loan": "Personal loan",
    "car_loan": "Car loan",
    "credit_card": "Credit card",
    "mortgage": "Mortgage",
    "other": "Other",
}


@dataclass
class AssetRow:
    type: str = "savings"
    currency: str = "India"
    name: str = ""
    total: Optional[float] = None
    label: str = ""          # only used for type "other"
    comment: str = ""

    def has_data(self) -> bool:
        return self.total is not None or self.name.strip() != "" or (
            self.type == "other" and self.label.strip() != "")


@dataclass
class LiabilityRow:
    type: str = "personal_loan"
    currency: str = "India"
    name: str = ""
    total: Optional[float] = None
    comment: str = ""

    def has_data(self) -> bool:
        return self.total is not None or self.name.strip() != ""


def normalize_type(value, allowed: dict, default: str) -> str:
    return value if value in allowed else default


def _sum_inr(rows) -> float:
    return sum(convert_to_inr(float(r.total), r.currency) for r in rows if r.total is not None)


def approx_total(assets, liabilities):
    """Rough net value in INR, or None when no row has an amount."""
    if not any(r.total is not None for r in list(assets) + list(liabilities)):
        return None
    assets_inr = _sum_inr(assets)
    liabilities_inr = _sum_inr(liabilities)
    return {
        "net_inr": assets_inr - liabilities_inr,
        "assets_inr": assets_inr,
        "liabilities_inr": liabilities_inr,
    }


def validate_rows(assets, liabilities) -> str:
    """First problem found, or "" if the rows can be saved."""
    asset_rows = [r for r in assets if r.has_data()]
    liability_rows = [r for r in liabilities if r.has_data()]
    for r in asset_rows:
        msg = validate_name(r.name, "asset")
        if msg:
            return msg
    for r in liability_rows:
        msg = validate_name(r.name, "liability")
        if msg:
            return msg
    if asset_rows or liability_rows:
        totals = approx_total(asset_rows, liability_rows)
        net = totals["net_inr"] if totals else 0.0
        if net <= 0:
            return "Net value (assets minus liabilities) must be greater than 0."
    return ""


def assets_form_data(country: str, assets, liabilities) -> dict:
    """Shape saved under formType "assets"; empty fields are dropped."""
    accounts = []
    for r in assets:
        if r.total is None and not (r.type == "other" and r.label.strip()):
            continue
        row = {"type": r.type, "currency": r.currency}
        if r.name.strip():
            row["name"] = r.name.strip()
        if r.total is not None:
            row["total"] = float(r.total)
        if r.type == "other":
            row["label"] = r.label.strip()
        if r.comment.strip():
            row["comment"] = r.comment.strip()
        accounts.append(row)

    debts = []
    for r in liabilities:
        if not r.has_data():
            continue
        row = {"type": r.type, "currency": r.currency}
        if r.name.strip():
            row["name"] = r.name.strip()
        if r.total is not None:
            row["total"] = float(r.total)
        if r.comment.strip():
            row["comment"] = r.comment.strip()
        debts.append(row)

    return {"currency": country, "accounts": accounts, "liabilities": debts}
