from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.customers.models import Customer
from modules.employees.models import Employee

SEED_CUSTOMERS = [
    ("Ana", "Souza", "ana.souza@example.com", "512-555-0101", "12 Oak St", "Austin", "TX", "73301"),
    ("Bruno", "Lima", "bruno.lima@example.com", "206-555-0102", "400 Pine Ave", "Seattle", "WA", "98101"),
    ("Carla", "Mendes", "carla.mendes@example.com", "303-555-0103", "9 Elm Rd", "Denver", "CO", "80202"),
    ("Daniel", "Costa", "daniel.costa@example.com", "617-555-0104", "77 Beacon St", "Boston", "MA", "02108"),
    ("Helena", "Ferreira", "helena.ferreira@example.com", "312-555-0105", "1 Lake Dr", "Chicago", "IL", "60601"),
]

SEED_EMPLOYEES = [
    ("Igor", "Ramos", "igor.ramos@example.com", "555-0201", "Engineering", Decimal("98000.00")),
    ("Julia", "Oliveira", "julia.oliveira@example.com", "555-0202", "Engineering", Decimal("105500.00")),
    ("Fernanda", "Rocha", "fernanda.rocha@example.com", "555-0203", "Sales", Decimal("67000.00")),
    ("Gabriel", "Santos", "gabriel.santos@example.com", "555-0204", "Finance", Decimal("72250.50")),
    ("Eduardo", "Alves", "eduardo.alves@example.com", "555-0205", "Support", Decimal("48000.00")),
]


class Command(BaseCommand):
    help = "Seed database with sample customers and employees (idempotent)."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        customers_created = self._seed_customers()
        employees_created = self._seed_employees()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"customers={customers_created}, "
                f"employees={employees_created}"
            )
        )

    def _seed_customers(self) -> int:
        created = 0
        for first, last, email, phone, address, city, state, zip_code in SEED_CUSTOMERS:
            _, was_created = Customer.objects.get_or_create(
                email=email,
                defaults={
                    "first_name": first,
                    "last_name": last,
                    "phone": phone,
                    "address": address,
                    "city": city,
                    "state": state,
                    "zip_code": zip_code,
                },
            )
            created += was_created
        return created

    def _seed_employees(self) -> int:
        created = 0
        for first, last, email, phone, department, salary in SEED_EMPLOYEES:
            _, was_created = Employee.objects.get_or_create(
                email=email,
                defaults={
                    "first_name": first,
                    "last_name": last,
                    "phone": phone,
                    "department": department,
                    "salary": salary,
                },
            )
            created += was_created
        return created
