from pocketledger.models.user import User
from pocketledger.models.account import Account
from pocketledger.models.category import Category
from pocketledger.models.merchant import Merchant
from pocketledger.models.transaction import Transaction, TransactionType
