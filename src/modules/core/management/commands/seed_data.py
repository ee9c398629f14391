from __future__ import annotations

from django.core.management.base import BaseCommand

from modules.customers.models import Customer

SEED_CUSTOMERS = [
    ("Ana Souza", "39053344705", "ana@example.com", "11988887777"),
    ("Bruno Lima", "11222333000181", "bruno@example.com", "21977776666"),
    ("Carla Mendes", "98765432100", "carla@example.com", ""),
    ("Daniel Costa", "12345678901", "daniel@example.com", "31966665555"),
    ("Fernanda Rocha", "74125896300", "fernanda@example.com", ""),
]


class Command(BaseCommand):
    help = "Seed database with sample customers for local development."

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        created = 0
        for name, document, email, phone in SEED_CUSTOMERS:
            _, was_created = Customer.objects.get_or_create(
                document=document,
                defaults={"name": name, "email": email, "phone": phone},
            )
            created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: customers_created={created}, "
                f"customers_total={Customer.objects.count()}"
            )
        )
