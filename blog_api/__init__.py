"""
Blog API Application — root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain models and repository interfaces, use cases, and the MongoDB
infrastructure behind them.
"""
