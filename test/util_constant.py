# Test Utility Constants

# Test Passwords
DEFAULT_PASSWORD = 'P@ssw0rd'
WRONG_PASSWORD = 'Wr0ngP@ss'

# Test Emails
TEST_EMAIL = 'test@example.com'
ANOTHER_EMAIL = 'another@example.com'
UNKNOWN_EMAIL = 'nobody@example.com'

# Test Products
PRODUCT_1 = {'name': 'Product 1', 'price': 10.99, 'category': 'Electronics', 'stock': 5}
PRODUCT_2 = {'name': 'Product 2', 'price': 20.99, 'category': 'Books', 'stock': 10}

# Well-formed UUID that is never assigned
MISSING_PRODUCT_ID = '01890a5d-ac96-774b-bcce-b302099a8057'
