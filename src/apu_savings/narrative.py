"""Narrative generator — plain-English interpretation of savings results.

``summarize`` builds the short "Fuel Cost Savings Summary" paragraph shown
under the charts.  It carries ``<span class="font-bold">`` markup around
the figures; callers embed it as HTML, unescaped.

``generate_report`` builds a longer plain-text report for download.
"""

from __future__ import annotations

import math

from apu_savings.config.assumptions import (
    APU_DUTY_FRACTION,
    APU_FUEL_BURN_RATE,
    MAIN_ENGINE_IDLE_FUEL_BURN_RATE,
)
from apu_savings.config.inputs import FleetInputs
from apu_savings.engine.rounding import round_half_up
from apu_savings.models.results import SavingsResults


def format_number(value: float) -> str:
    """Render a count without a redundant decimal: ``20`` not ``20.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_usd(value: float) -> str:
    """Whole dollars, rounded half-up, with en-US thousands separators."""
    rounded = round_half_up(value)
    if math.isnan(rounded):
        return "$NaN"
    if math.isinf(rounded):
        return "$∞" if rounded > 0 else "$-∞"
    return f"${int(rounded):,}"


def _bold(text: str) -> str:
    return f'<span class="font-bold">{text}</span>'


def _plural(count: float, unit: str) -> str:
    return f"{format_number(count)} {unit}{'s' if count > 1 else ''}"


def format_payback(payback_months: int | float) -> str:
    """Decompose a month count into ``"2 years and 1 month"`` style text.

    A zero component is left out; a count of exactly 1 is singular.
    Fractional months are kept (``25.5`` → ``"2 years and 1.5 months"``).
    An infinite count reads ``"Infinity years"``; nan gives an empty string.
    """
    if math.isfinite(payback_months):
        years = math.floor(payback_months / 12)
        # remainder keeps the sign of the dividend
        months = math.fmod(payback_months, 12)
    else:
        years = payback_months / 12
        months = math.nan

    text = ""
    if years > 0:
        text += _plural(years, "year")
    if months > 0:
        text += f"{' and ' if years > 0 else ''}{_plural(months, 'month')}"
    return text


def summarize(
    fleet_size: float,
    net_annual_savings: float,
    apu_installation_cost: float,
    payback_months: int | float,
) -> str:
    """Two-sentence savings summary with bold markup around the figures.

    Non-positive net savings always reads "not financially viable",
    whatever the payback figure says.
    """
    total_purchase_price = apu_installation_cost * fleet_size

    savings_text = (
        f"By adopting APUs across {_bold(f'{format_number(fleet_size)} trucks')}, "
        f"you could achieve net annual fuel cost savings of {_bold(format_usd(net_annual_savings))}."
    )

    investment = f"The initial investment of {_bold(format_usd(total_purchase_price))}"
    if net_annual_savings <= 0:
        payback_text = f"{investment} is not financially viable at this time."
    elif payback_months < 1:
        payback_text = f"{investment} has a very quick payback period of less than {_bold('one month')}."
    else:
        payback_text = (
            f"{investment} has a projected payback period of approximately "
            f"{_bold(format_payback(payback_months))}."
        )

    return f"{savings_text} {payback_text}"


def summarize_results(inputs: FleetInputs, results: SavingsResults) -> str:
    """``summarize`` fed from an inputs/results pair."""
    return summarize(
        inputs.fleet_size,
        results.net_annual_savings,
        inputs.apu_installation_cost,
        results.payback_months,
    )


def generate_report(inputs: FleetInputs, results: SavingsResults) -> str:
    """Generate a sectioned plain-text report for one calculation.

    Covers:
      1. Fleet and assumptions
      2. Annual idling cost
      3. Investment and payback
      4. Cumulative savings by year
      5. Verdict
    """
    sections: list[str] = []

    # ── 1. Fleet & assumptions ──
    sections.append("=" * 60)
    sections.append("FLEET & ASSUMPTIONS")
    sections.append("=" * 60)
    sections.append(
        f"Trucks: {format_number(inputs.fleet_size)}\n"
        f"Idle time: {format_number(inputs.idle_time)} hrs/day\n"
        f"Operating days: {format_number(inputs.operating_days_per_year)} per year\n"
        f"Fuel price: ${inputs.fuel_price:,.2f}/gal\n"
        f"Main engine idle burn: {MAIN_ENGINE_IDLE_FUEL_BURN_RATE} gal/hr\n"
        f"APU burn: {APU_FUEL_BURN_RATE} gal/hr for {APU_DUTY_FRACTION:.0%} of idle time"
    )

    # ── 2. Annual idling cost ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("ANNUAL IDLING COST")
    sections.append("=" * 60)
    sections.append(
        f"Pre-APU:  {format_usd(results.pre_apu_cost_per_truck)} per truck | "
        f"{format_usd(results.pre_apu_cost_total)} fleet\n"
        f"Post-APU: {format_usd(results.post_apu_cost_per_truck)} per truck | "
        f"{format_usd(results.post_apu_cost_total)} fleet\n"
        f"Fuel savings: {format_usd(results.annual_fuel_savings_total)}\n"
        f"Maintenance: {format_usd(results.annual_maintenance_cost_total)}\n"
        f"Net annual savings: {format_usd(results.net_annual_savings)}"
    )

    # ── 3. Investment ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("INVESTMENT")
    sections.append("=" * 60)
    payback = format_payback(results.payback_months) if results.net_annual_savings > 0 else ""
    sections.append(
        f"Initial capital: {format_usd(results.total_initial_capital_cost)}\n"
        f"Annualized APU cost: {format_usd(results.annualized_apu_cost_per_year)} per year\n"
        f"Payback: {results.payback_years:.1f} years"
        + (f" ({payback})" if payback else "")
        + f"\nNet benefit over {format_number(inputs.apu_useful_life)}-year life: "
        f"{format_usd(results.total_net_benefit)}"
    )

    # ── 4. Cumulative savings ──
    if results.cumulative_savings:
        sections.append("")
        sections.append("=" * 60)
        sections.append("CUMULATIVE NET SAVINGS")
        sections.append("=" * 60)
        for point in results.cumulative_savings:
            sections.append(f"  {point.year:10s}  {format_usd(point.savings):>14s}")

    # ── 5. Verdict ──
    sections.append("")
    sections.append("=" * 60)
    sections.append("VERDICT")
    sections.append("=" * 60)
    if results.net_annual_savings <= 0:
        sections.append("APUs do NOT pay for themselves: maintenance outweighs the fuel saved.")
    elif results.total_net_benefit < 0:
        sections.append(
            "Net savings are positive, but the APUs do not pay back their capital "
            "within their useful life."
        )
    else:
        sections.append("APUs pay back within their useful life.")

    return "\n".join(sections)
