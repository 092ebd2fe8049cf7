# routers/__init__.py
from . import bills, dashboard, electricity, expenses, payments, rooms, tenants

all_routers = [
     tenants.router,
     rooms.router,
     bills.router,
     payments.router,
     expenses.router,
     electricity.router,
     dashboard.router,
]
