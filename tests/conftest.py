import pytest

BOARDING_PASS = """
      BOARDING PASS
      THAI AIRWAYS TG315
      Bangkok to Phuket
      Passenger: John Smith
      Date: 02/06/2025
      Return: 10/06/2025
      Confirmation: ABC123
    """

HOTEL_CONFIRMATION = """Grand Hotel Bangkok
Booking ABC12345
Check-in 02/06/2025
Check-out 05/06/2025
"""

@pytest.fixture
def boarding_pass():
    return BOARDING_PASS

@pytest.fixture
def hotel_confirmation():
    return HOTEL_CONFIRMATION
