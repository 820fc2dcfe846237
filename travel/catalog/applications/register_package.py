from travel.catalog.domain.entity import TourPackage
from travel.catalog.domain.factory import CatalogFactory, PackageDetails
from travel.catalog.domain.repository import TourPackageRepository
from travel.shared.domain import UnitOfWork
from travel.shared.utils import get_logger

logger = get_logger("catalog")


class RegisterPackageService:
    """ツアーパッケージ登録ユースケース"""

    def __init__(
        self,
        unit_of_work: UnitOfWork,
        repository: TourPackageRepository,
        factory: CatalogFactory,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._repository = repository
        self._factory = factory

    def register(self, details: PackageDetails) -> TourPackage:
        """ツアーパッケージを登録する"""
        package = self._factory.create_package(details)
        with self._unit_of_work:
            self._repository.add(package)
        logger.info("Package registered", extra={"package_id": package.id.value})
        return package
