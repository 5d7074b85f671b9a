"""Sign-up/sign-in keep the profiles table in step with the identity provider."""

import pytest

from storefront.data.models import ProfileModel
from storefront.services.auth_service import AuthService
from storefront.utils.errors import IdentityError, StoreError


class TestSignUp:
    def test_creates_profile(self, db, identity):
        data = AuthService(db, identity).sign_up("asha@example.com", "secret1", "Asha Rao")

        profile = AuthService(db, identity).get_profile(data["user"]["id"])
        assert profile.email == "asha@example.com"
        assert profile.full_name == "Asha Rao"

    def test_existing_profile_is_not_an_error(self, db, session_factory, identity):
        earlier = session_factory()
        earlier.add(ProfileModel(id="user-1", email="asha@example.com", full_name="Old"))
        earlier.commit()
        earlier.close()

        data = AuthService(db, identity).sign_up("asha@example.com", "secret1", "Asha Rao")

        assert data["user"]["id"] == "user-1"
        assert db.get(ProfileModel, "user-1").full_name == "Old"

    def test_other_store_errors_propagate(self, db, identity, monkeypatch):
        svc = AuthService(db, identity)

        def broken(profile):
            raise StoreError("creating profile failed")

        monkeypatch.setattr(svc.repo, "create_profile", broken)

        with pytest.raises(StoreError):
            svc.sign_up("asha@example.com", "secret1", "Asha Rao")

    def test_provider_rejection_propagates(self, db, identity):
        svc = AuthService(db, identity)
        svc.sign_up("asha@example.com", "secret1", "Asha Rao")

        with pytest.raises(IdentityError):
            svc.sign_up("asha@example.com", "secret1", "Asha Rao")


class TestSignIn:
    def test_creates_missing_profile_from_metadata(self, db, identity):
        identity.sign_up("ravi@example.com", "secret1", "Ravi K")

        data = AuthService(db, identity).sign_in("ravi@example.com", "secret1")

        profile = db.get(ProfileModel, data["user"]["id"])
        assert profile.full_name == "Ravi K"
        assert data["session"]["access_token"]

    def test_missing_metadata_name_falls_back_to_empty(self, db, identity):
        identity.sign_up("ravi@example.com", "secret1", "")

        data = AuthService(db, identity).sign_in("ravi@example.com", "secret1")

        assert db.get(ProfileModel, data["user"]["id"]).full_name == ""

    def test_racing_sign_ins_do_not_fail(self, session_factory, identity, monkeypatch):
        identity.sign_up("new@example.com", "secret1", "New User")
        first = AuthService(session_factory(), identity)
        second = AuthService(session_factory(), identity)
        # both saw no profile before either inserted
        monkeypatch.setattr(second.repo, "get_profile", lambda user_id: None)

        first.sign_in("new@example.com", "secret1")
        data = second.sign_in("new@example.com", "secret1")

        assert first.get_profile(data["user"]["id"]) is not None

    def test_bad_credentials_raise(self, db, identity):
        with pytest.raises(IdentityError):
            AuthService(db, identity).sign_in("nobody@example.com", "nope")


class TestSessionPassThrough:
    def test_current_user_and_sign_out(self, db, identity):
        identity.sign_up("asha@example.com", "secret1", "Asha")
        svc = AuthService(db, identity)
        token = svc.sign_in("asha@example.com", "secret1")["session"]["access_token"]

        assert svc.get_current_user(token)["email"] == "asha@example.com"

        svc.sign_out(token)
        assert svc.get_current_user(token) is None

    def test_unknown_profile_is_none(self, db, identity):
        assert AuthService(db, identity).get_profile("missing") is None
