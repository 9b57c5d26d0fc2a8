"""Chart builders for the dashboard.

Each builder takes a ``SavingsResults`` and returns a fresh plotly figure;
nothing is cached or mutated between results.
"""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from apu_savings.analysis.sensitivity import SensitivityResult
from apu_savings.models.results import SavingsResults

COLORS = {
    "primary": "#0d2e56",
    "secondary": "#1791c7",
    "positive": "#35ce8d",
    "negative": "#ff8811",
    "grid": "#4a5568",
}


def _style(fig: go.Figure, title: str) -> go.Figure:
    fig.update_layout(
        title=dict(text=title, font=dict(size=15, family="Inter", color="white")),
        showlegend=False,
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(family="Inter", color="white"),
        margin=dict(t=50, b=30, l=20, r=20),
        height=320,
    )
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=False)
    return fig


def cost_comparison_chart(results: SavingsResults) -> go.Figure:
    """Bar chart: fleet idling cost before vs after APUs."""
    fig = go.Figure(go.Bar(
        x=["Pre-APU Cost", "Post-APU Cost"],
        y=[results.pre_apu_cost_total, results.post_apu_cost_total],
        marker_color=[COLORS["negative"], COLORS["positive"]],
        hovertemplate="%{x}: $%{y:,.0f}<extra></extra>",
    ))
    fig.update_yaxes(rangemode="tozero")
    return _style(fig, "Annual Idling Cost Comparison")


def cumulative_savings_chart(results: SavingsResults) -> go.Figure:
    """Filled line chart of the cumulative net savings series."""
    fig = go.Figure(go.Scatter(
        x=[p.year for p in results.cumulative_savings],
        y=[p.savings for p in results.cumulative_savings],
        mode="lines+markers",
        line=dict(color=COLORS["positive"], shape="spline"),
        fill="tozeroy",
        fillcolor="rgba(53, 206, 141, 0.2)",
        hovertemplate="%{x}: $%{y:,.0f}<extra></extra>",
    ))
    return _style(fig, "Cumulative Net Savings Over APU Life")


def cost_benefit_chart(results: SavingsResults) -> go.Figure:
    """Horizontal bar chart: annual fuel savings vs annual maintenance."""
    fig = go.Figure(go.Bar(
        x=[results.annual_fuel_savings_total, results.annual_maintenance_cost_total],
        y=["Annual Fuel Savings", "Annual Maintenance"],
        orientation="h",
        marker_color=[COLORS["positive"], COLORS["negative"]],
        hovertemplate="%{y}: $%{x:,.0f}<extra></extra>",
    ))
    fig.update_xaxes(rangemode="tozero")
    return _style(fig, "Annual Cost-Benefit Breakdown")


def tornado_chart(sensitivity: SensitivityResult) -> go.Figure:
    """Tornado chart: metric at low / high value for each swept input."""
    # plotly draws horizontal bars bottom-up; reverse so the widest is on top
    bars = list(reversed(sensitivity.bars))
    names = [b.param_name for b in bars]
    base = sensitivity.base_metric

    fig = go.Figure()
    fig.add_trace(go.Bar(
        y=names, x=[b.metric_at_low - base for b in bars], base=base,
        orientation="h", name="Low", marker_color=COLORS["negative"],
        customdata=[b.low_value for b in bars],
        hovertemplate="%{y} = %{customdata:,.2f}<br>%{x:,.0f}<extra></extra>",
    ))
    fig.add_trace(go.Bar(
        y=names, x=[b.metric_at_high - base for b in bars], base=base,
        orientation="h", name="High", marker_color=COLORS["positive"],
        customdata=[b.high_value for b in bars],
        hovertemplate="%{y} = %{customdata:,.2f}<br>%{x:,.0f}<extra></extra>",
    ))
    fig.update_layout(barmode="overlay")
    fig = _style(fig, f"Sensitivity of {sensitivity.metric.replace('_', ' ')}")
    fig.update_layout(showlegend=True)
    return fig


def cumulative_savings_frame(results: SavingsResults) -> pd.DataFrame:
    """Cumulative series as a two-column table (Year, Cumulative Savings)."""
    return pd.DataFrame(
        [(p.year, p.savings) for p in results.cumulative_savings],
        columns=["Year", "Cumulative Savings ($)"],
    )
