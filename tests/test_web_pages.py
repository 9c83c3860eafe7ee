"""HTTP tests for the server-rendered pages: registration, login and the admin dashboard."""

import re
import unittest

from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.core.database import get_db
from app.main import app
from app.models import User
from tests.helpers import add_template, add_user, add_zone, make_session_factory, make_settings

TOKEN_RE = re.compile(r'name="token" value="([0-9a-f]{64})"')


class PageTestCase(unittest.TestCase):
    """Runs the real app against an in-memory database."""

    settings_overrides: dict[str, object] = {}

    def setUp(self) -> None:
        self.SessionLocal = make_session_factory()
        self.settings = make_settings(**self.settings_overrides)

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: self.settings
        self.client = TestClient(app, follow_redirects=False)
        self.db = self.SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        app.dependency_overrides.clear()

    def form_token(self, path: str) -> str:
        response = self.client.get(path)
        self.assertEqual(response.status_code, 200)
        match = TOKEN_RE.search(response.text)
        self.assertIsNotNone(match)
        return match.group(1)

    def user_count(self) -> int:
        self.db.expire_all()
        return self.db.query(User).count()


class TestRegistrationPage(PageTestCase):
    def setUp(self) -> None:
        super().setUp()
        add_template(self.db, 1, "Administrator", ("user_is_ueberuser",))
        add_template(self.db, 5, "Read Only")

    def _form(self, token: str | None, **kwargs: str) -> dict[str, str]:
        data = {
            "username": "carol",
            "fullname": "Carol",
            "email": "carol@example.com",
            "password": "pw-12345",
            "password_confirm": "pw-12345",
        }
        if token is not None:
            data["token"] = token
        data.update(kwargs)
        return data

    def test_form_sets_session_token(self) -> None:
        response = self.client.get("/register")
        self.assertEqual(response.status_code, 200)
        self.assertIn(self.settings.SESSION_COOKIE_NAME, response.cookies)
        self.assertRegex(response.text, TOKEN_RE)

    def test_token_stable_across_renders(self) -> None:
        first = self.form_token("/register")
        second = self.form_token("/register")
        self.assertEqual(first, second)

    def test_successful_registration_redirects_to_login(self) -> None:
        token = self.form_token("/register")
        response = self.client.post("/register", data=self._form(token))
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/login?registered=1")
        self.db.expire_all()
        user = self.db.query(User).filter(User.username == "carol").one()
        self.assertEqual(user.perm_templ, 5)
        self.assertTrue(user.active)

    def test_base_url_prefix_applied_to_cookie_and_redirect(self) -> None:
        self.settings = make_settings(BASE_URL_PREFIX="/panel")
        form = self.client.get("/register")
        self.assertIn("Path=/panel", form.headers["set-cookie"])
        token = TOKEN_RE.search(form.text).group(1)
        name = self.settings.SESSION_COOKIE_NAME
        # The jar scopes the cookie to /panel, so send it explicitly to the unprefixed route.
        response = self.client.post(
            "/register",
            data=self._form(token),
            headers={"Cookie": f"{name}={form.cookies.get(name)}"},
        )
        self.assertEqual(response.headers["location"], "/panel/login?registered=1")

    def test_interface_title_from_settings(self) -> None:
        self.settings = make_settings(IFACE_TITLE="Example DNS Panel")
        response = self.client.get("/register")
        self.assertIn("<title>Example DNS Panel</title>", response.text)

    def test_missing_token_rejected(self) -> None:
        self.form_token("/register")
        response = self.client.post("/register", data=self._form(None))
        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid security token", response.text)
        self.assertEqual(self.user_count(), 0)

    def test_no_session_rejected(self) -> None:
        response = self.client.post("/register", data=self._form("f" * 64))
        self.assertEqual(response.status_code, 400)
        self.assertIn("Invalid security token", response.text)
        self.assertEqual(self.user_count(), 0)

    def test_error_keeps_live_token(self) -> None:
        token = self.form_token("/register")
        response = self.client.post(
            "/register", data=self._form(token, password_confirm="nope")
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("Passwords do not match", response.text)
        self.assertEqual(TOKEN_RE.search(response.text).group(1), token)
        self.assertNotIn("set-cookie", response.headers)
        self.assertEqual(self.user_count(), 0)

    def test_missing_fields(self) -> None:
        token = self.form_token("/register")
        response = self.client.post("/register", data=self._form(token, email="   "))
        self.assertEqual(response.status_code, 400)
        self.assertIn("All fields are required", response.text)

    def test_overlong_username(self) -> None:
        token = self.form_token("/register")
        response = self.client.post("/register", data=self._form(token, username="u" * 100))
        self.assertEqual(response.status_code, 400)
        self.assertIn("Username must be at most 64 characters", response.text)
        self.assertEqual(self.user_count(), 0)

    def test_duplicate_username(self) -> None:
        add_user(self.db, "carol", perm_templ=5)
        token = self.form_token("/register")
        response = self.client.post("/register", data=self._form(token))
        self.assertEqual(response.status_code, 400)
        self.assertIn("Username already exists", response.text)
        self.assertEqual(self.user_count(), 1)

    def test_error_message_is_escaped(self) -> None:
        token = self.form_token("/register")
        response = self.client.post(
            "/register",
            data=self._form(token, username="<script>", password_confirm="x"),
        )
        self.assertNotIn("<script>", response.text)
        self.assertIn("&lt;script&gt;", response.text)


class TestRegistrationUnavailable(PageTestCase):
    def test_only_admin_template(self) -> None:
        add_template(self.db, 1, "Administrator", ("user_is_ueberuser",))
        token = self.form_token("/register")
        response = self.client.post(
            "/register",
            data={
                "username": "dave",
                "email": "dave@example.com",
                "password": "pw",
                "password_confirm": "pw",
                "token": token,
            },
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("No public user role found", response.text)
        self.assertEqual(self.user_count(), 0)


class TestRegistrationDisabled(PageTestCase):
    settings_overrides = {"REGISTRATION_ENABLED": False}

    def test_pages_not_found(self) -> None:
        self.assertEqual(self.client.get("/register").status_code, 404)
        self.assertEqual(self.client.post("/register", data={}).status_code, 404)


class TestLoginPage(PageTestCase):
    def setUp(self) -> None:
        super().setUp()
        add_template(self.db, 1, "Administrator", ("user_is_ueberuser",))
        add_template(self.db, 3, "User")
        add_user(self.db, "admin", perm_templ=1, password="admin-pass")
        add_user(self.db, "bob", perm_templ=3, password="bob-pass")

    def test_registered_notice(self) -> None:
        response = self.client.get("/login?registered=1")
        self.assertIn("Registration successful", response.text)

    def test_superuser_login_goes_to_dashboard(self) -> None:
        token = self.form_token("/login")
        response = self.client.post(
            "/login", data={"username": "admin", "password": "admin-pass", "token": token}
        )
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/admin/dashboard")

    def test_regular_login_goes_home(self) -> None:
        token = self.form_token("/login")
        response = self.client.post(
            "/login", data={"username": "bob", "password": "bob-pass", "token": token}
        )
        self.assertEqual(response.headers["location"], "/")

    def test_wrong_password(self) -> None:
        token = self.form_token("/login")
        response = self.client.post(
            "/login", data={"username": "bob", "password": "nope", "token": token}
        )
        self.assertEqual(response.status_code, 401)
        self.assertIn("Invalid username or password.", response.text)

    def test_login_requires_token(self) -> None:
        self.form_token("/login")
        response = self.client.post("/login", data={"username": "bob", "password": "bob-pass"})
        self.assertEqual(response.status_code, 400)

    def test_logout_clears_session(self) -> None:
        token = self.form_token("/login")
        self.client.post("/login", data={"username": "bob", "password": "bob-pass", "token": token})
        response = self.client.get("/logout")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/login")
        self.assertIn(f"{self.settings.SESSION_COOKIE_NAME}=", response.headers["set-cookie"])
        self.client.cookies.clear()
        home = self.client.get("/")
        self.assertNotIn("Signed in as", home.text)


class TestAdminDashboardPage(PageTestCase):
    def setUp(self) -> None:
        super().setUp()
        add_template(self.db, 1, "Administrator", ("user_is_ueberuser",))
        add_template(self.db, 3, "User")
        add_user(self.db, "admin", perm_templ=1, password="admin-pass")
        add_user(self.db, "bob", perm_templ=3, password="bob-pass")
        add_zone(self.db, "alpha.test", records=3)
        add_zone(self.db, "beta.test", records=3)
        add_zone(self.db, "gamma.test", records=4)

    def _login(self, username: str, password: str) -> None:
        token = self.form_token("/login")
        response = self.client.post(
            "/login", data={"username": username, "password": password, "token": token}
        )
        self.assertEqual(response.status_code, 302)

    def test_anonymous_redirected(self) -> None:
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/")
        self.assertNotIn("total-zones", response.text)

    def test_non_superuser_redirected(self) -> None:
        self._login("bob", "bob-pass")
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response.status_code, 302)
        self.assertEqual(response.headers["location"], "/")
        self.assertNotIn("total-zones", response.text)

    def test_superuser_sees_summary(self) -> None:
        self._login("admin", "admin-pass")
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response.status_code, 200)
        self.assertIn('id="total-zones">3<', response.text)
        self.assertIn('id="total-records">10<', response.text)
        self.assertIn('id="total-users">2<', response.text)
        self.assertIn("Admin Control Plane", response.text)
        text = response.text
        self.assertLess(text.index("gamma.test"), text.index("beta.test"))
        self.assertLess(text.index("beta.test"), text.index("alpha.test"))

    def test_tampered_session_redirected(self) -> None:
        self.client.cookies.set(self.settings.SESSION_COOKIE_NAME, "not-a-jwt")
        response = self.client.get("/admin/dashboard")
        self.assertEqual(response.status_code, 302)


if __name__ == "__main__":
    unittest.main()
