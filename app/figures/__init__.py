"""
Plotly figure builders.

Design rules:
- Builders are pure: DataFrame + customization values in, `go.Figure` out
- No Streamlit imports here (components/charts.py does the rendering)
- `overview=True` produces the compact, axis-less preview used in the gallery
"""
