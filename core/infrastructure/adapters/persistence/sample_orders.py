"""
Sample orders for demos and local development.

Loaded into the repository at startup when seeding is enabled.
"""
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import List, Optional
import logging

from core.domain.entities.order import Customer, DeliveryAddress, OrderItem, RiceOrder
from core.domain.enums.order_status import OrderStatus
from core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


def build_sample_orders(now: Optional[datetime] = None) -> List[RiceOrder]:
    """
    Build the five demo orders ORD001..ORD005.

    Args:
        now: Reference time for order and delivery dates (defaults to current UTC time)

    Returns:
        Fresh RiceOrder instances, one per status except CANCELLED
    """
    now = now or datetime.now(timezone.utc)

    return [
        RiceOrder(
            order_id="ORD001",
            customer=Customer(
                customer_id="CUST001",
                name="Ahmad Rizki",
                email="ahmad.rizki@email.com",
                phone_number="+62-812-3456-7890",
            ),
            items=[
                OrderItem(
                    item_id="ITEM001",
                    rice_type="Nasi Goreng Special",
                    quantity=2,
                    price_per_unit=Decimal("45000"),
                    spice_level="Medium",
                    notes="Extra shrimp please",
                ),
                OrderItem(
                    item_id="ITEM002",
                    rice_type="Nasi Goreng Ayam",
                    quantity=1,
                    price_per_unit=Decimal("35000"),
                    spice_level="Mild",
                    notes="No vegetables",
                ),
            ],
            delivery_address=DeliveryAddress(
                street="Jl. Sudirman No. 123",
                city="Jakarta",
                state="DKI Jakarta",
                postal_code="12190",
                country="Indonesia",
                instructions="Please call upon arrival",
            ),
            status=OrderStatus.DELIVERED,
            order_date=now - timedelta(days=2),
            delivery_time=now - timedelta(days=2) + timedelta(hours=1),
            payment_method="Credit Card",
            total_amount=Decimal("125000"),
        ),
        RiceOrder(
            order_id="ORD002",
            customer=Customer(
                customer_id="CUST002",
                name="Siti Nurhaliza",
                email="siti.nur@email.com",
                phone_number="+62-821-9876-5432",
            ),
            items=[
                OrderItem(
                    item_id="ITEM003",
                    rice_type="Nasi Goreng Seafood",
                    quantity=3,
                    price_per_unit=Decimal("55000"),
                    spice_level="Hot",
                    notes="Extra sambal",
                ),
            ],
            delivery_address=DeliveryAddress(
                street="Jl. Gatot Subroto No. 456",
                city="Bandung",
                state="West Java",
                postal_code="40123",
                country="Indonesia",
                instructions="Ring doorbell twice",
            ),
            status=OrderStatus.OUT_FOR_DELIVERY,
            order_date=now - timedelta(hours=3),
            delivery_time=now + timedelta(minutes=30),
            payment_method="Cash",
            total_amount=Decimal("165000"),
        ),
        RiceOrder(
            order_id="ORD003",
            customer=Customer(
                customer_id="CUST003",
                name="Budi Santoso",
                email="budi.santoso@email.com",
                phone_number="+62-813-5555-1234",
            ),
            items=[
                OrderItem(
                    item_id="ITEM004",
                    rice_type="Nasi Goreng Kampung",
                    quantity=2,
                    price_per_unit=Decimal("30000"),
                    spice_level="Extra Hot",
                    notes="With fried egg on top",
                ),
                OrderItem(
                    item_id="ITEM005",
                    rice_type="Nasi Goreng Pete",
                    quantity=1,
                    price_per_unit=Decimal("40000"),
                    spice_level="Medium",
                    notes="Extra pete",
                ),
            ],
            delivery_address=DeliveryAddress(
                street="Jl. Diponegoro No. 789",
                city="Surabaya",
                state="East Java",
                postal_code="60241",
                country="Indonesia",
                instructions="Leave at security desk",
            ),
            status=OrderStatus.PREPARING,
            order_date=now - timedelta(minutes=45),
            delivery_time=now + timedelta(hours=1),
            payment_method="E-Wallet",
            total_amount=Decimal("100000"),
        ),
        RiceOrder(
            order_id="ORD004",
            customer=Customer(
                customer_id="CUST004",
                name="Dewi Lestari",
                email="dewi.lestari@email.com",
                phone_number="+62-822-7777-8888",
            ),
            items=[
                OrderItem(
                    item_id="ITEM006",
                    rice_type="Nasi Goreng Special",
                    quantity=4,
                    price_per_unit=Decimal("45000"),
                    spice_level="Mild",
                    notes="Family size portion",
                ),
            ],
            delivery_address=DeliveryAddress(
                street="Jl. Thamrin No. 321",
                city="Yogyakarta",
                state="Special Region of Yogyakarta",
                postal_code="55511",
                country="Indonesia",
                instructions="Apartment unit 5B",
            ),
            status=OrderStatus.CONFIRMED,
            order_date=now - timedelta(minutes=20),
            delivery_time=now + timedelta(minutes=50),
            payment_method="Debit Card",
            total_amount=Decimal("180000"),
        ),
        RiceOrder(
            order_id="ORD005",
            customer=Customer(
                customer_id="CUST005",
                name="Eko Prasetyo",
                email="eko.prasetyo@email.com",
                phone_number="+62-856-4444-9999",
            ),
            items=[
                OrderItem(
                    item_id="ITEM007",
                    rice_type="Nasi Goreng Ayam",
                    quantity=1,
                    price_per_unit=Decimal("35000"),
                    spice_level="Hot",
                    notes="Extra crispy",
                ),
                OrderItem(
                    item_id="ITEM008",
                    rice_type="Nasi Goreng Seafood",
                    quantity=1,
                    price_per_unit=Decimal("55000"),
                    spice_level="Medium",
                    notes="No squid",
                ),
                OrderItem(
                    item_id="ITEM009",
                    rice_type="Nasi Goreng Kampung",
                    quantity=2,
                    price_per_unit=Decimal("30000"),
                    spice_level="Mild",
                    notes="Regular portion",
                ),
            ],
            delivery_address=DeliveryAddress(
                street="Jl. Ahmad Yani No. 567",
                city="Semarang",
                state="Central Java",
                postal_code="50149",
                country="Indonesia",
                instructions="Office building, 3rd floor",
            ),
            status=OrderStatus.PENDING,
            order_date=now - timedelta(minutes=5),
            delivery_time=now + timedelta(hours=2),
            payment_method="Cash",
            total_amount=Decimal("150000"),
        ),
    ]


def seed_sample_orders(repository: OrderRepository) -> int:
    """
    Insert the demo orders, skipping any ID already present.

    Args:
        repository: Target repository

    Returns:
        Number of orders inserted
    """
    inserted = 0
    for order in build_sample_orders():
        if repository.exists(order.order_id):
            logger.debug(f"Sample order already present, skipping: {order.order_id}")
            continue
        repository.insert(order)
        inserted += 1

    logger.info(f"Seeded {inserted} sample order(s)")
    return inserted
