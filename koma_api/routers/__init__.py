"""
FastAPI routers grouped by domain (auth, users, wishlist, orders, cart, health).

Each file exposes an APIRouter included by the app factory. Routers fetch
their service from app.state and leave error rendering to the app.
"""
