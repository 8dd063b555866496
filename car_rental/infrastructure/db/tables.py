from sqlalchemy import Column, Date, DateTime, Integer, MetaData, Numeric, String, Table

metadata = MetaData()

cars = Table(
    "cars",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("brand", String(100), nullable=False),
    Column("model", String(100), nullable=False),
    Column("stock", Integer, nullable=False),
    Column("peak_price", Numeric(12, 2), nullable=False),
    Column("mid_price", Numeric(12, 2), nullable=False),
    Column("off_price", Numeric(12, 2), nullable=False),
    Column("lock_version", Integer, nullable=False, default=0),
)

users = Table(
    "users",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("license_number", String(100), nullable=False),
    Column("license_expiry_date", Date, nullable=False),
)

# Cada reserva guarda el snapshot del usuario y de las tarifas del auto
bookings = Table(
    "bookings",
    metadata,
    Column("id", String(32), primary_key=True),
    Column("user_id", String(32), nullable=False, index=True),
    Column("user_name", String(255), nullable=False),
    Column("user_email", String(255), nullable=False),
    Column("license_number", String(100), nullable=False),
    Column("license_expiry_date", Date, nullable=False),
    Column("car_id", String(32), nullable=False, index=True),
    Column("car_brand", String(100), nullable=False),
    Column("car_model", String(100), nullable=False),
    Column("car_stock", Integer, nullable=False),
    Column("peak_price", Numeric(12, 2), nullable=False),
    Column("mid_price", Numeric(12, 2), nullable=False),
    Column("off_price", Numeric(12, 2), nullable=False),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
    Column("total_price", Numeric(12, 2), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)
