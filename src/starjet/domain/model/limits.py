"""Business-rule bounds shared by the calculation engine and the sale flows."""

MAX_ITEMS_PER_SALE = 50
MAX_ITEM_DIMENSION = 10_000
MAX_QUANTITY_PER_ITEM = 10_000
MAX_PRICE_PER_ITEM = 1_000_000
MAX_DISCOUNT_PERCENT = 100

# Largest integer a double represents exactly; row totals beyond it are faults.
MAX_SAFE_TOTAL = 2**53 - 1

# Minimum spacing between two sale submissions from the same session.
MIN_SUBMISSION_INTERVAL = 2.0

MAX_SEARCH_LENGTH = 100
