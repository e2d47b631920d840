"""HTTP routers wiring the render dispatcher into FastAPI."""
