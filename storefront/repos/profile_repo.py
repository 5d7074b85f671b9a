# storefront/repos/profile_repo.py
from storefront.data.models.profile import ProfileModel
from storefront.repos.base import BaseRepo


class ProfileRepo(BaseRepo):
    def get_profile(self, user_id: str) -> ProfileModel | None:
        with self.guard("fetching profile"):
            return self.db.get(ProfileModel, user_id)

    def create_profile(self, profile: ProfileModel) -> ProfileModel:
        with self.guard("creating profile"):
            self.db.add(profile)
            self.db.commit()
            self.db.refresh(profile)
        return profile
