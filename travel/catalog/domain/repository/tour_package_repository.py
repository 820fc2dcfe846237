from abc import abstractmethod

from travel.catalog.domain.entity import TourPackage
from travel.catalog.domain.value_object import PackageId
from travel.shared.domain import Repository


class TourPackageRepository(Repository[TourPackage, PackageId]):
    """ツアーパッケージリポジトリのインターフェース"""

    @abstractmethod
    def add(self, package: TourPackage) -> None:
        """ツアーパッケージを登録する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, package_id: PackageId) -> TourPackage | None:
        """ツアーパッケージIDで検索する"""
        raise NotImplementedError
