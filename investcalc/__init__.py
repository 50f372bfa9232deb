"""Monthly investment projection engine and its Flask API."""
