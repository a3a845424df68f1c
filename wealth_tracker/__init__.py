"""Personal finance tracking: valuation, metrics, projections and KPIs."""
