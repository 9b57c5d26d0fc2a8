"""APU Fleet Calculator — Streamlit dashboard.

Layout: sidebar fleet parameters → summary cards → three charts →
narrative summary → sensitivity and report expanders.

Run with:
    streamlit run src/apu_savings/dashboard/app.py
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

from apu_savings.analysis.sensitivity import (
    SWEEPABLE_METRICS,
    break_even_fuel_price,
    run_sensitivity,
    sweep_metric,
)
from apu_savings.config import (
    APU_DUTY_FRACTION,
    APU_FUEL_BURN_RATE,
    MAIN_ENGINE_IDLE_FUEL_BURN_RATE,
    FleetInputs,
)
from apu_savings.dashboard.charts import (
    COLORS,
    cost_benefit_chart,
    cost_comparison_chart,
    cumulative_savings_chart,
    cumulative_savings_frame,
    tornado_chart,
)
from apu_savings.dashboard.state import SESSION_KEY, CalculatorState
from apu_savings.log import setup_logging
from apu_savings.narrative import format_usd, generate_report, summarize_results

logger = setup_logging("INFO")

_DEF = FleetInputs()

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="APU Fleet Calculator", page_icon="🚛", layout="wide")

st.markdown("""
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

html, body, [class*="css"] {
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif !important;
}

h1 {
    font-family: 'Inter', sans-serif !important;
    font-size: 1.75rem !important;
    font-weight: 800 !important;
    letter-spacing: -0.5px;
}
h2 {
    font-family: 'Inter', sans-serif !important;
    font-size: 1.15rem !important;
    font-weight: 700 !important;
    border-left: 3px solid #1791c7;
    padding-left: 12px !important;
}

section[data-testid="stSidebar"] label {
    font-size: 0.75rem !important;
    font-weight: 500 !important;
}

.font-bold { font-weight: 700; }

.summary-box {
    background: #1791c7;
    border: 1px solid rgba(255,255,255,0.08);
    border-radius: 10px;
    padding: 18px 22px;
    color: #fff;
    line-height: 1.6;
}
</style>
""", unsafe_allow_html=True)

st.markdown("""
<div style="text-align: center; margin-bottom: 1.5rem;">
    <div style="font-family: 'Inter', sans-serif; font-size: 2rem; font-weight: 800; color: #fff;">
        APU Fleet Calculator Dashboard
    </div>
    <div style="font-family: 'Inter', sans-serif; font-size: 0.9rem; color: rgba(255,255,255,0.5); margin-top: 4px;">
        Evaluate fuel cost savings from installing Auxiliary Power Units (APUs)
    </div>
</div>
""", unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _card(title: str, value: str, subtitle: str = "", footer: str = "", accent: str = COLORS["positive"]) -> str:
    """Return HTML for a summary card: title, big value, optional sub-lines."""
    sub = f'<div style="font-size: 0.7rem; color: rgba(255,255,255,0.5);">{subtitle}</div>' if subtitle else ""
    foot = f'<div style="font-size: 0.7rem; color: rgba(255,255,255,0.5); margin-top: 8px;">{footer}</div>' if footer else ""
    return f"""
    <div style="
        background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
        border: 1px solid rgba(255,255,255,0.06);
        border-radius: 10px;
        padding: 14px 12px;
        text-align: center;
        min-height: 128px;
    ">
        <div style="font-size: 0.68rem; font-weight: 700; color: rgba(255,255,255,0.5); letter-spacing: 0.5px;">{title}</div>
        <div style="font-size: 1.5rem; font-weight: 700; color: {accent}; margin: 8px 0 4px;">{value}</div>
        {sub}
        {foot}
    </div>
    """


def _reset_inputs() -> None:
    """Reset-button callback: put every widget back on its default."""
    for name in FleetInputs.model_fields:
        st.session_state[f"in_{name}"] = float(getattr(_DEF, name))


# ---------------------------------------------------------------------------
# SIDEBAR: fleet parameters
# ---------------------------------------------------------------------------
if SESSION_KEY not in st.session_state:
    st.session_state[SESSION_KEY] = CalculatorState.initial()
    _reset_inputs()

st.sidebar.header("Fleet Parameters")

_LABELS = {
    "fleet_size": ("Fleet Size (# of trucks)", 1.0),
    "idle_time": ("Idle Time (hours/day)", 0.5),
    "fuel_price": ("Fuel Price ($/gallon)", 0.05),
    "apu_installation_cost": ("APU Installation Cost ($/truck)", 500.0),
    "apu_maintenance_cost": ("Annual APU Maintenance Cost ($/truck)", 50.0),
    "apu_useful_life": ("APU Useful Life (years)", 1.0),
    "operating_days_per_year": ("Operating Days Per Year", 5.0),
}

values: dict[str, float] = {}
for name, (label, step) in _LABELS.items():
    values[name] = st.sidebar.number_input(
        label,
        step=step,
        key=f"in_{name}",
        help=FleetInputs.model_fields[name].description,
    )

with st.sidebar.container(border=True):
    st.markdown("**Assumptions Used**")
    st.caption(
        f"Idling fuel consumption (main engine): **{MAIN_ENGINE_IDLE_FUEL_BURN_RATE} gallons per hour**  \n"
        f"Idling fuel consumption (APU): **{APU_FUEL_BURN_RATE} gallons per hour**  \n"
        f"APU runs for **{APU_DUTY_FRACTION:.0%}** of idle time"
    )
    st.caption("*These values are based on commonly accepted industry averages and can be "
               "adjusted for a more precise analysis.*")

st.sidebar.button("Reset to Defaults", on_click=_reset_inputs, use_container_width=True, type="primary")

# ---------------------------------------------------------------------------
# Compute: one new revision per input change
# ---------------------------------------------------------------------------
state: CalculatorState = st.session_state[SESSION_KEY].with_inputs(FleetInputs(**values))
if state.revision != st.session_state[SESSION_KEY].revision:
    logger.info("Inputs changed (revision %d): net annual savings %s",
                state.revision, format_usd(state.results.net_annual_savings))
st.session_state[SESSION_KEY] = state

inputs = state.inputs
results = state.results

# ---------------------------------------------------------------------------
# Summary cards
# ---------------------------------------------------------------------------
net_accent = COLORS["positive"] if results.net_annual_savings > 0 else COLORS["negative"]
cards = [
    ("PRE-APU ANNUAL COST", format_usd(results.pre_apu_cost_per_truck), "Per Truck",
     f"<b>{format_usd(results.pre_apu_cost_total)}</b> Fleet Total", COLORS["negative"]),
    ("POST-APU ANNUAL COST", format_usd(results.post_apu_cost_per_truck), "Per Truck",
     f"<b>{format_usd(results.post_apu_cost_total)}</b> Fleet Total", COLORS["positive"]),
    ("ANNUAL FUEL SAVINGS", format_usd(results.annual_fuel_savings_total), "Total Fleet", "", COLORS["positive"]),
    ("NET ANNUAL SAVINGS", format_usd(results.net_annual_savings), "After Maintenance", "", net_accent),
    ("PAYBACK PERIOD", f"{results.payback_years:.1f}", "Years", "", COLORS["positive"]),
]
for col, (title, value, subtitle, footer, accent) in zip(st.columns(5), cards):
    col.markdown(_card(title, value, subtitle, footer, accent), unsafe_allow_html=True)

st.write("")

# ---------------------------------------------------------------------------
# Charts: each slot is emptied and redrawn from the current results
# ---------------------------------------------------------------------------
chart_builders = [cost_comparison_chart, cumulative_savings_chart, cost_benefit_chart]
for builder in chart_builders:
    slot = st.empty()
    with slot.container(border=True):
        st.plotly_chart(builder(results), use_container_width=True, key=f"{builder.__name__}_{state.revision}")

# ---------------------------------------------------------------------------
# Narrative
# ---------------------------------------------------------------------------
st.header("Fuel Cost Savings Summary")
st.markdown(
    f'<div class="summary-box">{summarize_results(inputs, results)}</div>',
    unsafe_allow_html=True,
)

st.write("")
c1, c2, c3 = st.columns(3)
c1.metric("Initial Capital Cost", format_usd(results.total_initial_capital_cost))
c2.metric("Annualized APU Cost", format_usd(results.annualized_apu_cost_per_year),
          help="Capital spread over the useful life + annual maintenance")
c3.metric("Net Benefit Over APU Life", format_usd(results.total_net_benefit))

# ---------------------------------------------------------------------------
# Sensitivity
# ---------------------------------------------------------------------------
with st.expander("Sensitivity analysis"):
    metric = st.selectbox(
        "Metric", SWEEPABLE_METRICS,
        index=SWEEPABLE_METRICS.index("total_net_benefit"),
        format_func=lambda m: m.replace("_", " ").capitalize(),
    )
    sensitivity = run_sensitivity(inputs, metric=metric)
    st.plotly_chart(tornado_chart(sensitivity), use_container_width=True)
    st.dataframe(
        [{
            "Input": b.param_name,
            "Low": b.low_value,
            "High": b.high_value,
            "At low": b.metric_at_low,
            "At high": b.metric_at_high,
            "Swing": b.delta,
        } for b in sensitivity.bars],
        use_container_width=True, hide_index=True,
    )

    be_price = break_even_fuel_price(inputs)
    if be_price is not None:
        st.caption(f"Break-even fuel price (net annual savings = 0): **${be_price:,.2f}/gal**")
        low = min(be_price, inputs.fuel_price) * 0.5
        high = max(be_price, inputs.fuel_price) * 1.5
        curve = sweep_metric(inputs, "fuel_price", low, high, metric="net_annual_savings")
        st.line_chart(
            pd.DataFrame(curve, columns=["Fuel price ($/gal)", "Net annual savings ($)"]),
            x="Fuel price ($/gal)", height=240, use_container_width=True,
        )

# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------
with st.expander("Cumulative savings table & report"):
    st.dataframe(cumulative_savings_frame(results), use_container_width=True, hide_index=True)
    report = generate_report(inputs, results)
    st.code(report, language=None)
    st.download_button("Download report", report, file_name="apu_savings_report.txt", mime="text/plain")
