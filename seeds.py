from locatecar.config import Config
from locatecar.exceptions import DuplicateKeyError
from locatecar.logging_config import configure_logging
from locatecar.models.customer import Customer
from locatecar.models.store import Store
from locatecar.models.vehicle import Vehicle, VehicleCategory
from locatecar.services.customer_service import CustomerService
from locatecar.services.vehicle_service import VehicleService

DEMO_VEHICLES = [
    Vehicle("AAA-0A00", "MODEL1", "MANUFACTURER1", VehicleCategory.SMALL),
    Vehicle("BBB-0B00", "MODEL2", "MANUFACTURER2", VehicleCategory.MEDIUM),
    Vehicle("CCC-0C00", "MODEL3", "MANUFACTURER3", VehicleCategory.SUV),
]

DEMO_CUSTOMERS = [
    Customer.individual("CUSTOMER PF1", "pf1@customer.com.br", "1199999-9999", "12345678901"),
    Customer.individual("CUSTOMER PF2", "pf2@customer.com.br", "1188888-9999", "98765432101"),
    Customer.individual("CUSTOMER PF3", "pf3@customer.com.br", "1177777-7777", "11122233344"),
    Customer.organization("CUSTOMER PJ1", "pj1@customer.com.br", "1199999-9999", "12345678000155"),
    Customer.organization("CUSTOMER PJ2", "pj2@customer.com.br", "1188888-8888", "98765432000144"),
    Customer.organization("CUSTOMER PJ3", "pj3@customer.com.br", "1177777-8888", "11122233000133"),
]


def seed(store: Store) -> int:
    """
    Register the demo fleet and customers, skipping any that already exist.
    Returns how many records were added.
    """
    vehicles = VehicleService(store)
    customers = CustomerService(store)
    added = 0
    for v in DEMO_VEHICLES:
        try:
            vehicles.register(v)
            added += 1
        except DuplicateKeyError:
            pass
    for c in DEMO_CUSTOMERS:
        try:
            customers.register(c)
            added += 1
        except DuplicateKeyError:
            pass
    return added


def main():
    configure_logging(Config.LOG_LEVEL)
    store = Store(Config.DATA_DIR or None)
    if not store.is_empty:
        print("Existing data loaded; nothing to seed.")
        return
    added = seed(store)
    print(f"Seed complete: {added} record(s) added.")


if __name__ == "__main__":
    main()
