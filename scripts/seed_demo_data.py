#!/usr/bin/env python3
"""
Seed a demo user with a mixed portfolio.
Creates one login and a handful of holdings across every asset class,
with buy prices jittered around realistic levels.
"""

import sys
from pathlib import Path
from decimal import Decimal
import random

# Add src to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from folio.config.settings import get_settings
from folio.core.exceptions import ConflictError
from folio.repositories.sqlalchemy import (
    SqlAlchemyHoldingRepository,
    SqlAlchemyUserRepository,
    get_session_factory,
    init_db,
)
from folio.services import AuthService, HoldingCreate, HoldingService


DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demo1234"

# (symbol, asset class, approximate price, quantity range)
HOLDINGS = [
    ("AAPL", "equity", 180.0, (5, 40)),
    ("MSFT", "equity", 420.0, (2, 15)),
    ("VFIAX", "fund", 450.0, (1, 10)),
    ("GC=F", "commodity", 2000.0, (1, 3)),
    ("BTC", "crypto", 30000.0, (0.05, 1)),
    ("ETH", "crypto", 1800.0, (0.5, 8)),
]


def seed_demo_data():
    """Create the demo user (or log into it) and add holdings."""
    init_db()
    db = get_session_factory()()
    try:
        auth_service = AuthService(SqlAlchemyUserRepository(db), get_settings())
        holding_service = HoldingService(SqlAlchemyHoldingRepository(db))

        print(f"Creating user: {DEMO_EMAIL}")
        try:
            result = auth_service.register(DEMO_EMAIL, DEMO_PASSWORD)
            print("✓ User created")
        except ConflictError:
            result = auth_service.login(DEMO_EMAIL, DEMO_PASSWORD)
            print("✓ User already exists")
        owner_id = result.user.user_id

        print("=" * 60)
        for symbol, asset_class, base_price, (low, high) in HOLDINGS:
            price = Decimal(str(round(base_price * random.uniform(0.85, 1.15), 2)))
            quantity = Decimal(str(round(random.uniform(low, high), 4)))
            holding_service.add_holding(
                owner_id,
                HoldingCreate(symbol=symbol, asset_class=asset_class, quantity=quantity, buy_price=price),
            )
            print(f"  {symbol:<6} {asset_class:<10} {quantity} @ {price}")

        print("\n✓ Demo data seeded!")
        print(f"\nLog in with {DEMO_EMAIL} / {DEMO_PASSWORD}, then:")
        print(f"  - View portfolio: GET /api/portfolio/{owner_id}")
    finally:
        db.close()


if __name__ == "__main__":
    try:
        seed_demo_data()
    except Exception as e:
        print(f"\n✗ Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)
