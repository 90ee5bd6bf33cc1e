"""API tests for liking and unliking recipes."""

from tests.support import API, OUT_OF_RANGE_ID, ApiTestCase


class TestLikes(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.chef = self.signup("cheftest")
        self.fan = self.signup("foodfan")
        self.recipe = self.create_recipe(self.chef["token"])
        self.like_url = f"{API}/recipes/{self.recipe['id']}/like"

    def test_like_recipe(self) -> None:
        response = self.client.post(self.like_url, headers=self.auth(self.fan["token"]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Recipe liked")
        recipe = self.client.get(f"{API}/recipes/{self.recipe['id']}").json()
        self.assertEqual(recipe["likeCount"], 1)

    def test_like_requires_authentication(self) -> None:
        self.assertEqual(self.client.post(self.like_url).status_code, 401)

    def test_like_missing_recipe(self) -> None:
        response = self.client.post(
            f"{API}/recipes/99999/like", headers=self.auth(self.fan["token"])
        )
        self.assertEqual(response.status_code, 404)

    def test_duplicate_like_conflicts(self) -> None:
        headers = self.auth(self.fan["token"])
        self.assertEqual(self.client.post(self.like_url, headers=headers).status_code, 200)
        response = self.client.post(self.like_url, headers=headers)
        self.assertEqual(response.status_code, 409)
        self.assertIn("already liked", response.json()["message"])

    def test_two_users_can_like_same_recipe(self) -> None:
        self.client.post(self.like_url, headers=self.auth(self.fan["token"]))
        self.client.post(self.like_url, headers=self.auth(self.chef["token"]))
        recipe = self.client.get(f"{API}/recipes/{self.recipe['id']}").json()
        self.assertEqual(recipe["likeCount"], 2)

    def test_unlike_recipe(self) -> None:
        headers = self.auth(self.fan["token"])
        self.client.post(self.like_url, headers=headers)
        response = self.client.delete(self.like_url, headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "Recipe unliked")
        self.assertFalse(self.client.get(self.like_url, headers=headers).json()["liked"])

    def test_unlike_requires_authentication(self) -> None:
        self.assertEqual(self.client.delete(self.like_url).status_code, 401)

    def test_unlike_missing_recipe(self) -> None:
        response = self.client.delete(
            f"{API}/recipes/99999/like", headers=self.auth(self.fan["token"])
        )
        self.assertEqual(response.status_code, 404)

    def test_unlike_when_not_liked(self) -> None:
        response = self.client.delete(self.like_url, headers=self.auth(self.fan["token"]))
        self.assertEqual(response.status_code, 400)
        self.assertIn("not liked", response.json()["message"])

    def test_like_status(self) -> None:
        headers = self.auth(self.fan["token"])
        self.assertFalse(self.client.get(self.like_url, headers=headers).json()["liked"])
        self.client.post(self.like_url, headers=headers)
        self.assertTrue(self.client.get(self.like_url, headers=headers).json()["liked"])

    def test_like_status_anonymous_is_false(self) -> None:
        response = self.client.get(self.like_url)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["liked"])

    def test_like_status_with_bad_token_is_unauthenticated(self) -> None:
        response = self.client.get(self.like_url, headers=self.auth("bad.token.value"))
        self.assertEqual(response.status_code, 401)

    def test_like_status_with_non_bearer_header_is_unauthenticated(self) -> None:
        response = self.client.get(self.like_url, headers={"Authorization": "Basic Zm9vOmJhcg=="})
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.headers["WWW-Authenticate"], "Bearer")

    def test_out_of_range_recipe_id_is_not_found(self) -> None:
        url = f"{API}/recipes/{OUT_OF_RANGE_ID}/like"
        headers = self.auth(self.fan["token"])
        self.assertEqual(self.client.post(url, headers=headers).status_code, 404)
        self.assertEqual(self.client.delete(url, headers=headers).status_code, 404)
        response = self.client.get(url, headers=headers)
        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["liked"])
