"""Static lookup lists served to the web client."""

COUNTRIES = [
    "Nigeria", "Kenya", "South Africa", "Ghana", "Egypt",
    "Tanzania", "Morocco", "Algeria", "Ethiopia", "Uganda",
    "Rwanda", "Senegal", "Ivory Coast", "Cameroon", "Namibia",
]

CURRENCIES = [
    {"code": "USD", "name": "US Dollar"},
    {"code": "NGN", "name": "Nigerian Naira"},
    {"code": "KES", "name": "Kenyan Shilling"},
    {"code": "ZAR", "name": "South African Rand"},
    {"code": "GHS", "name": "Ghanaian Cedi"},
    {"code": "EGP", "name": "Egyptian Pound"},
    {"code": "TZS", "name": "Tanzanian Shilling"},
    {"code": "MAD", "name": "Moroccan Dirham"},
    {"code": "DZD", "name": "Algerian Dinar"},
    {"code": "ETB", "name": "Ethiopian Birr"},
    {"code": "UGX", "name": "Ugandan Shilling"},
    {"code": "RWF", "name": "Rwandan Franc"},
    {"code": "XOF", "name": "West African CFA Franc"},
    {"code": "XAF", "name": "Central African CFA Franc"},
    {"code": "NAD", "name": "Namibian Dollar"},
]

# Tags offered by the listing and search forms
FEATURE_OPTIONS = [
    "Pool", "Garden", "Garage", "Security", "Furnished",
    "Air Conditioning", "Gym", "Balcony", "Parking",
    "Ocean View", "Mountain View", "City View", "Fireplace",
    "Basement", "Elevator", "Doorman", "Wheelchair Access",
]
