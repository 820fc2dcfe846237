from travel.customer.domain.entity import Customer
from travel.customer.domain.factory import CustomerDetails, CustomerFactory
from travel.customer.domain.repository import AccountRepository, CustomerRepository
from travel.shared.domain import UnitOfWork
from travel.shared.utils import get_logger

logger = get_logger("customer")


class RegisterCustomerService:
    """顧客登録ユースケース

    Customer ロールのアカウントと顧客を 1 トランザクションで登録する。
    ユーザー名・メールアドレス・電話番号のいずれかが重複していれば
    DuplicateResourceException となり、何も登録されない。
    """

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        account_repository: AccountRepository,
        customer_repository: CustomerRepository,
        factory: CustomerFactory,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._accounts = account_repository
        self._customers = customer_repository
        self._factory = factory

    def register(self, details: CustomerDetails) -> Customer:
        """顧客を登録する"""
        account, customer = self._factory.create(details)

        with self._unit_of_work:
            self._accounts.add(account)
            self._customers.add(customer)

        logger.info(
            "Customer registered",
            extra={"customer_id": customer.id.value, "account_id": account.id.value},
        )
        return customer
