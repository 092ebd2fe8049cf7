import os
from decimal import Decimal

from dotenv import load_dotenv

# Load .env
load_dotenv()

# Database
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")
DATABASE_URL = os.getenv("DATABASE_URL")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

# Auth
JWT_SECRET = os.getenv("JWT_SECRET")
JWT_ALGORITHM = "HS256"

CORS_ORIGINS = [o for o in os.getenv("CORS_ORIGINS", "").split(",") if o]

# Billing
ELECTRICITY_RATE_PER_UNIT = Decimal(os.getenv("ELECTRICITY_RATE_PER_UNIT", "12"))
BILL_DUE_DAYS = int(os.getenv("BILL_DUE_DAYS", "10"))

# Receipts / sharing
PHONE_COUNTRY_CODE = os.getenv("PHONE_COUNTRY_CODE", "91")
SHARE_LINK_SCHEME = os.getenv("SHARE_LINK_SCHEME", "whatsapp")
BUSINESS_NAME = os.getenv("BUSINESS_NAME", "Shiv Shiva Residency")
BUSINESS_UPI_ID = os.getenv("BUSINESS_UPI_ID", "jyotishivshiva@ybl")
BUSINESS_CONTACT = os.getenv("BUSINESS_CONTACT", "+91 8929400391")
BUSINESS_ADDRESS = os.getenv("BUSINESS_ADDRESS", "A-373 sector 70, Noida-201301")

# Expense receipt uploads
AZURE_STORAGE_ACCOUNT = os.getenv("AZURE_STORAGE_ACCOUNT")
AZURE_STORAGE_KEY = os.getenv("AZURE_STORAGE_KEY")
RECEIPT_CONTAINER = os.getenv("RECEIPT_CONTAINER", "expense-receipts")

PORT = int(os.getenv("PORT", 10000))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
