from .dynamodb_id_generator import DynamoDBIdGenerator as DynamoDBIdGenerator
from .dynamodb_table import TravelTable as TravelTable
from .dynamodb_table import item_key as item_key
from .dynamodb_table import unique_key as unique_key
from .dynamodb_unit_of_work import DynamoDBUnitOfWork as DynamoDBUnitOfWork
