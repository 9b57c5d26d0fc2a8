"""Dashboard support — chart builders and the calculator state container.

The Streamlit page itself lives in ``app.py`` and is run with
``streamlit run``; it is not imported from here.
"""

from apu_savings.dashboard.charts import (
    cost_benefit_chart,
    cost_comparison_chart,
    cumulative_savings_chart,
    cumulative_savings_frame,
    tornado_chart,
)
from apu_savings.dashboard.state import CalculatorState

__all__ = [
    "CalculatorState",
    "cost_comparison_chart",
    "cumulative_savings_chart",
    "cost_benefit_chart",
    "tornado_chart",
    "cumulative_savings_frame",
]
