# app.py
import logging

import pandas as pd
import streamlit as st
import plotly.graph_objects as go

import wizard as wz
from assets import (ASSET_TYPES, LIABILITY_TYPES, AssetRow, LiabilityRow, approx_total, assets_form_data,
                    normalize_type, validate_rows)
from currency import CURRENCY_CODES, convert_between_currencies, current_month_key
from config import (APP_NAME, LIFESTYLE_OPTIONS, HOUSING_OPTIONS, HEALTHCARE_OPTIONS,
                    TRAVEL_OPTIONS, SAFETY_OPTIONS, setup_logging)
from countries import countries_sorted, country_info, default_buckets, ExpenseBucket
from expenses import total_monthly_expenses, expense_breakdown, out_of_range, project_bucket_costs, basket_for_year
from formatting import format_currency, format_input_value
from savings import savings_schedule
from scenarios import safety_table
from exporters import user_data_payload, export_config, session_snapshot, export_breakdown, export_schedule
from validation import ValidationError
from ui import inject_css, app_header, progress_bar, step_header, small_help, option_buttons, kpi_card, error_text

setup_logging()
logger = logging.getLogger("app")

# ------------- Page setup -------------
st.set_page_config(page_title=APP_NAME, page_icon="🪺", layout="wide")
inject_css()
app_header(APP_NAME, "Imagine you are fully retired tomorrow. Your money must last forever.")

if "wizard" not in st.session_state:
    st.session_state.wizard = wz.initial_state()


def dispatch(action):
    st.session_state.wizard = wz.reduce(st.session_state.wizard, action)
    st.rerun()


state = st.session_state.wizard
answers = state.answers
cur = country_info(answers.country).currency

# ------------- Sidebar (assumptions) -------------
st.sidebar.header("Projection assumptions")
a = state.assumptions
with st.sidebar.form("assumptions"):
    current_age = st.number_input("Your age", min_value=18, max_value=85, value=int(a.current_age))
    retirement_age = st.number_input("Retire at", min_value=18, max_value=90, value=int(a.retirement_age),
                                     help="If this is not after your age we still plan for one year.")
    inflation = st.slider("Inflation (%/yr)", 0.0, 15.0, a.inflation * 100, 0.5) / 100.0
    mode = st.radio("Return model", ["simple", "advanced"], index=0 if a.mode == "simple" else 1,
                    help="Simple uses one flat rate; advanced blends equity and debt returns.")
    pre_ret = st.slider("Pre-retirement return (%/yr)", 0.0, 20.0, a.pre_retirement_return * 100, 0.5) / 100.0
    post_ret = st.slider("Post-retirement return (%/yr)", 0.0, 15.0, a.post_retirement_return * 100, 0.5) / 100.0
    eq_ret = st.slider("Equity return (%/yr)", 0.0, 25.0, a.equity_return * 100, 0.5) / 100.0
    debt_ret = st.slider("Debt return (%/yr)", 0.0, 15.0, a.debt_return * 100, 0.5) / 100.0
    eq_alloc = st.slider("Equity allocation (%)", 0, 100, int(round(a.equity_alloc * 100)), 5) / 100.0
    if st.form_submit_button("Apply"):
        dispatch(wz.SetAssumptions({
            "current_age": int(current_age), "retirement_age": int(retirement_age),
            "inflation": inflation, "mode": mode,
            "pre_retirement_return": pre_ret, "post_retirement_return": post_ret,
            "equity_return": eq_ret, "debt_return": debt_ret, "equity_alloc": eq_alloc,
        }))


def _rows(df: pd.DataFrame, row_cls, allowed: dict, default_type: str):
    out = []
    for r in df.to_dict("records"):
        total = r.get("total")
        out.append(row_cls(
            type=normalize_type(r.get("type"), allowed, default_type),
            currency=r.get("currency") or "India",
            name=str(r.get("name") or ""),
            total=None if pd.isna(total) else float(total),
        ))
    return out


with st.sidebar.expander("Net worth helper"):
    small_help("List what you own and owe in any currency; we total it roughly in INR.")
    empty = pd.DataFrame({"type": pd.Series(dtype="str"), "currency": pd.Series(dtype="str"),
                          "name": pd.Series(dtype="str"), "total": pd.Series(dtype="float")})
    currency_col = st.column_config.SelectboxColumn("currency", options=CURRENCY_CODES, default="India")
    assets_df = st.data_editor(empty, num_rows="dynamic", key="assets_rows", column_config={
        "type": st.column_config.SelectboxColumn("type", options=list(ASSET_TYPES), default="savings"),
        "currency": currency_col,
    })
    debts_df = st.data_editor(empty, num_rows="dynamic", key="liability_rows", column_config={
        "type": st.column_config.SelectboxColumn("type", options=list(LIABILITY_TYPES), default="personal_loan"),
        "currency": currency_col,
    })
    asset_rows = _rows(assets_df, AssetRow, ASSET_TYPES, "savings")
    debt_rows = _rows(debts_df, LiabilityRow, LIABILITY_TYPES, "personal_loan")
    problem = validate_rows(asset_rows, debt_rows)
    totals = approx_total(asset_rows, debt_rows)
    if totals:
        st.write(f"**Approx. net:** {format_currency(totals['net_inr'], '₹')}")
    error_text(problem)
    if totals and not problem and st.button("Use as liquid net worth"):
        local = convert_between_currencies(totals["net_inr"], current_month_key(), "India", answers.country, {})
        st.session_state.assets_form = assets_form_data(answers.country, asset_rows, debt_rows)
        dispatch(wz.SetField("liquid_net_worth", str(round(local))))

# ------------- Wizard -------------
progress_bar(state.step, wz.TOTAL_STEPS, wz.progress(state))

if state.step > 0 and not state.submitting and not state.submitted:
    if st.button("⬅️ Back"):
        dispatch(wz.Back())

if state.step == wz.LIFESTYLE:
    step_header("How would you like to live?")
    picked = option_buttons(LIFESTYLE_OPTIONS, "lifestyle", answers.lifestyle)
    if picked:
        dispatch(wz.Answer("lifestyle", picked))

elif state.step == wz.COUNTRY:
    step_header("Where will you retire?")
    options = countries_sorted()
    labels = [f"{country_info(c).flag} {c}" for c in options]
    idx = options.index(answers.country) if answers.country in options else len(options) - 1
    choice = st.selectbox("Country", labels, index=idx)
    chosen = options[labels.index(choice)]
    small_help(f"Typical monthly spend: {country_info(chosen).avg_monthly}")
    if chosen != answers.country:
        # Buckets are per-country; start again from the new country's defaults
        st.session_state.wizard = wz.reduce(state, wz.Answer("country", chosen))
        dispatch(wz.SetBuckets(None))

    buckets = state.buckets or default_buckets(answers.country)
    st.markdown("#### Estimated monthly expenses")
    edited = {}
    cols = st.columns(3)
    for i, (key, b) in enumerate(buckets.items()):
        with cols[i % 3]:
            value = st.number_input(
                f"{b.label} ({cur}/month)", min_value=0.0, value=float(b.value),
                step=float(b.step or 100), key=f"bucket_{answers.country}_{key}",
            )
            edited[key] = ExpenseBucket(value=value, label=b.label, min=b.min, max=b.max, step=b.step)
    for key in out_of_range(edited):
        b = edited[key]
        st.warning(f"{b.label} is outside the usual range "
                   f"({format_currency(b.min, cur)} – {format_currency(b.max, cur)}).")
    total = total_monthly_expenses(edited)
    st.write(f"**Monthly total:** {format_currency(total, cur)} · **Annual:** {format_currency(total * 12, cur)}")
    c1, c2 = st.columns(2)
    if c1.button("Use these expenses", type="primary"):
        st.session_state.wizard = wz.reduce(state, wz.SetBuckets(edited))
        dispatch(wz.Continue())
    if c2.button("Skip, estimate from my answers"):
        st.session_state.wizard = wz.reduce(state, wz.SetBuckets(None))
        dispatch(wz.Continue())

elif state.step == wz.HOUSING:
    step_header("Where will you live?")
    if answers.housing:
        small_help("Pre-selected from your lifestyle choice.")
    picked = option_buttons(HOUSING_OPTIONS, "housing", answers.housing)
    if picked:
        dispatch(wz.Answer("housing", picked))

elif state.step == wz.HEALTHCARE:
    step_header("What kind of healthcare do you want?")
    picked = option_buttons(HEALTHCARE_OPTIONS, "healthcare", answers.healthcare)
    if picked:
        dispatch(wz.Answer("healthcare", picked))

elif state.step == wz.TRAVEL:
    step_header("How much will you travel?")
    picked = option_buttons(TRAVEL_OPTIONS, "travel", answers.travel)
    if picked:
        dispatch(wz.Answer("travel", picked))

elif state.step == wz.INCOME:
    step_header("Your money today", "Liquid net worth is required. All other fields are optional. "
                "Shorthand like 5L, 2Cr, 10k or 1.5m works.")
    fields_ = [
        ("liquid_net_worth", "Liquid Net Worth"),
        ("annual_income_job", "Annual Income from Job"),
        ("other_income", "Other Income"),
        ("pension", "Pension"),
        ("liabilities", "Monthly Liabilities"),
    ]
    with st.form("income"):
        raws = {}
        for name, label in fields_:
            raws[name] = st.text_input(f"{label} ({cur})",
                                       value=format_input_value(getattr(answers, name), cur))
        submitted = st.form_submit_button("Continue", type="primary")
    error_text(state.errors.get("liquid_net_worth", ""))
    if submitted:
        s = state
        for name, _ in fields_:
            s = wz.reduce(s, wz.SetField(name, raws[name]))
        st.session_state.wizard = s
        dispatch(wz.Continue())

elif state.step == wz.SAFETY:
    step_header("How safe should your withdrawals be?")
    picked = option_buttons(SAFETY_OPTIONS, "safety", answers.safety)
    if picked:
        dispatch(wz.Answer("safety", picked))

elif state.step == wz.CONTACT:
    if state.submitted:
        st.success("You're all set! Your plan has been saved.")
    else:
        step_header("Save your plan", "We'll review the full details and reply manually.")
        if not state.token:
            email = st.text_input("Email", value=state.email, placeholder="you@email.com")
            if email != state.email:
                dispatch(wz.SetEmail(email))
            error_text(state.errors.get("email", ""))
        else:
            small_help("Your data will be saved automatically.")
        notes = st.text_area("Anything else we should know?", value=state.notes, height=90)
        if notes != state.notes:
            dispatch(wz.SetNotes(notes))
        error_text(state.errors.get("liquid_net_worth", ""))
        error_text(state.errors.get("submit", ""))
        c1, c2 = st.columns(2)
        if c1.button("Submit", type="primary", disabled=state.submitting):
            dispatch(wz.Submit())
        if c2.button("Start over"):
            dispatch(wz.Reset())

    if state.submitting:
        try:
            payload = user_data_payload(state)
        except ValidationError as e:
            dispatch(wz.SubmitFailed(str(e)))
        else:
            logger.info("retirement plan saved for %s", payload.get("email") or payload.get("token"))
            st.session_state.last_payload = payload
            dispatch(wz.SubmitSucceeded(state.token))

# ------------- Results -------------
if state.step >= wz.SAFETY or state.submitted:
    res = wz.result(state)
    plan = wz.plan(state)
    st.markdown("---")
    st.markdown("### Your retirement number")
    small_help(f"To sustain your selected lifestyle forever in {answers.country}, you need approximately:")

    c1, c2, c3 = st.columns(3)
    kpi_card(c1, "Required corpus", format_currency(res.required, res.currency))
    kpi_card(c2, "Annual spend", format_currency(res.annual_spend, res.currency))
    kpi_card(c3, "Years to retirement", f"{plan.years_to_retirement}")

    r1, r2, r3 = st.columns(3)
    kpi_card(r1, "Aggressive (higher risk, 5%)", format_currency(res.aggressive, res.currency))
    kpi_card(r2, "Balanced (recommended, 4%)", format_currency(res.balanced, res.currency))
    kpi_card(r3, "Very Safe (conservative, 3%)", format_currency(res.conservative, res.currency))

    st.markdown("### Your savings plan")
    p1, p2, p3 = st.columns(3)
    kpi_card(p1, "Needed at retirement (nominal)", format_currency(plan.future_value_needed, res.currency))
    kpi_card(p2, "Current savings grown", format_currency(plan.future_value_of_current_savings, res.currency))
    if plan.shortfall > 0:
        kpi_card(p3, "Save each month", format_currency(round(plan.monthly_savings_needed), res.currency),
                 f"{plan.savings_rate:.1f}% of income after liabilities" if plan.has_income_data else "")
    else:
        kpi_card(p3, "Surplus at retirement", format_currency(plan.surplus, res.currency),
                 "Your current savings already cover it")

    schedule = savings_schedule(plan, state.assumptions)
    figS = go.Figure()
    figS.add_trace(go.Scatter(x=schedule["age"], y=schedule["balance"], mode="lines", name="Projected savings"))
    figS.add_trace(go.Scatter(x=schedule["age"], y=schedule["target"], mode="lines", name="Target (inflated)",
                              line=dict(dash="dash")))
    figS.update_layout(title="Path to your number", xaxis_title="Age", yaxis_title=res.currency,
                       hovermode="x unified", margin=dict(l=30, r=20, t=60, b=30))
    st.plotly_chart(figS, use_container_width=True)

    with st.expander("Every safety level"):
        table = safety_table(answers, state.buckets)
        table["required"] = [format_currency(v, res.currency) for v in table["required"]]
        st.dataframe(table, use_container_width=True, hide_index=True)

    if state.buckets:
        with st.expander("Expense breakdown"):
            bd = expense_breakdown(state.buckets)
            figB = go.Figure(go.Bar(x=bd["label"], y=bd["monthly"]))
            figB.update_layout(title="Monthly expenses by category", margin=dict(l=30, r=20, t=60, b=30))
            st.plotly_chart(figB, use_container_width=True)
            proj = project_bucket_costs(state.buckets, state.assumptions.inflation, plan.years_to_retirement)
            at_ret = basket_for_year(proj, plan.years_to_retirement)
            st.caption(f"The same basket costs {format_currency(at_ret['monthly_nominal'], res.currency)}"
                       f"/month in your retirement year.")
            name_csv, data_csv = export_breakdown(state.buckets)
            st.download_button("⬇️ Download breakdown (CSV)", data_csv, file_name=name_csv, mime="text/csv")

    # ------------- Export -------------
    name_cfg, data_cfg = export_config(session_snapshot(state, res, plan))
    st.download_button("⬇️ Download your plan (JSON)", data_cfg, file_name=name_cfg, mime="application/json")
    name_sch, data_sch = export_schedule(schedule)
    st.download_button("⬇️ Download savings path (CSV)", data_sch, file_name=name_sch, mime="text/csv")

st.markdown("---")
st.caption("This app uses simple rules of thumb and long-run return estimates. It's a planning tool, not personal advice.")
