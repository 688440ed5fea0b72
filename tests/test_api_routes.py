import json
import os
import shutil
import tempfile
import unittest

from app import create_app


class TestApiRoutes(unittest.TestCase):
    def setUp(self):
        self.data_dir = tempfile.mkdtemp()
        self.app = create_app({"TESTING": True, "DATA_DIR": self.data_dir})
        self.client = self.app.test_client()

    def tearDown(self):
        shutil.rmtree(self.data_dir, ignore_errors=True)

    def _register(self, username, password="pass123"):
        response = self.client.post(
            "/api/auth/register",
            json={"username": username, "password": password},
        )
        self.assertEqual(response.status_code, 201)
        return response.get_json()["user"]

    def _identity(self, user):
        return {"userId": user["id"], "username": user["username"]}

    def _create_post(self, user, **payload):
        body = dict(self._identity(user), **payload)
        response = self.client.post("/api/posts", json=body)
        self.assertEqual(response.status_code, 201)
        return response.get_json()

    def _read_collection(self, name):
        with open(os.path.join(self.data_dir, f"{name}.json"), encoding="utf-8") as fh:
            return json.load(fh)

    def test_health(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"status": "ok"})

    def test_auth_register_and_login_success(self):
        user = self._register("api_user")
        self.assertEqual(set(user), {"id", "username"})

        login_response = self.client.post(
            "/api/auth/login",
            json={"username": "api_user", "password": "pass123"},
        )
        self.assertEqual(login_response.status_code, 200)
        self.assertEqual(login_response.get_json()["user"], user)

        stored = self._read_collection("users")
        self.assertEqual(len(stored), 1)
        self.assertIn("passwordHash", stored[0])

    def test_auth_register_duplicate_is_conflict(self):
        self._register("alice")
        response = self.client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "different"},
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.get_json()["error"], "Username already exists")

    def test_auth_login_failures_are_indistinguishable(self):
        self._register("alice")

        wrong_password = self.client.post(
            "/api/auth/login",
            json={"username": "alice", "password": "nope"},
        )
        unknown_user = self.client.post(
            "/api/auth/login",
            json={"username": "ghost", "password": "pass123"},
        )

        self.assertEqual(wrong_password.status_code, 401)
        self.assertEqual(unknown_user.status_code, 401)
        self.assertEqual(wrong_password.get_json(), unknown_user.get_json())

    def test_auth_rejects_invalid_json(self):
        response = self.client.post(
            "/api/auth/register",
            data="not-json",
            headers={"Content-Type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()["error"], "Invalid JSON body")

    def test_list_posts_on_first_run_is_empty(self):
        response = self.client.get("/api/posts")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), [])

    def test_create_post_and_list_posts(self):
        alice = self._register("alice")

        post = self._create_post(alice, content="first post")
        self.assertEqual(post["content"], "first post")
        self.assertEqual(post["userId"], alice["id"])

        response = self.client.get("/api/posts")
        self.assertEqual(response.status_code, 200)
        posts = response.get_json()
        self.assertEqual(len(posts), 1)
        self.assertEqual(posts[0]["id"], post["id"])
        self.assertEqual(posts[0]["likedBy"], [])
        self.assertEqual(posts[0]["dislikedBy"], [])
        self.assertEqual(posts[0]["comments"], [])

        single = self.client.get(f"/api/posts/{post['id']}")
        self.assertEqual(single.status_code, 200)
        self.assertEqual(single.get_json(), posts[0])

    def test_create_post_with_media_only(self):
        alice = self._register("alice")

        post = self._create_post(alice, video="data:video/mp4;base64,AAAA")
        self.assertEqual(post["content"], "")
        self.assertEqual(post["video"], "data:video/mp4;base64,AAAA")

    def test_create_post_without_payload_is_rejected(self):
        alice = self._register("alice")

        response = self.client.post("/api/posts", json=self._identity(alice))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get("/api/posts").get_json(), [])

    def test_create_post_requires_identity(self):
        response = self.client.post("/api/posts", json={"content": "hello"})
        self.assertEqual(response.status_code, 400)

    def test_create_post_rejects_unknown_identity(self):
        response = self.client.post(
            "/api/posts",
            json={"userId": "forged", "username": "alice", "content": "hello"},
        )
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.get_json()["error"], "Unknown user")

    def test_create_post_rejects_oversized_body(self):
        self.app.config["MAX_CONTENT_LENGTH"] = 1024
        alice = self._register("alice")

        response = self.client.post(
            "/api/posts",
            json=dict(self._identity(alice), image="A" * 4096),
        )
        self.assertEqual(response.status_code, 413)
        self.assertEqual(response.get_json(), {"error": "Request body is too large"})

    def test_get_missing_post_is_404(self):
        response = self.client.get("/api/posts/missing")
        self.assertEqual(response.status_code, 404)

    def test_delete_post_requires_ownership(self):
        alice = self._register("alice")
        bob = self._register("bob")
        post = self._create_post(alice, content="mine")

        forbidden = self.client.delete(f"/api/posts/{post['id']}", json=self._identity(bob))
        self.assertEqual(forbidden.status_code, 403)
        self.assertEqual(len(self.client.get("/api/posts").get_json()), 1)

        missing = self.client.delete("/api/posts/missing", json=self._identity(bob))
        self.assertEqual(missing.status_code, 403)
        self.assertEqual(missing.get_json(), forbidden.get_json())

        deleted = self.client.delete(f"/api/posts/{post['id']}", json=self._identity(alice))
        self.assertEqual(deleted.status_code, 200)
        self.assertEqual(self.client.get("/api/posts").get_json(), [])

    def test_clear_my_posts(self):
        alice = self._register("alice")
        bob = self._register("bob")
        self._create_post(alice, content="a1")
        bob_post = self._create_post(bob, content="b1")
        self._create_post(alice, content="a2")

        response = self.client.delete("/api/posts", json=self._identity(alice))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json()["deleted"], 2)
        self.assertEqual(
            [p["id"] for p in self.client.get("/api/posts").get_json()],
            [bob_post["id"]],
        )

        again = self.client.delete("/api/posts", json=self._identity(alice))
        self.assertEqual(again.status_code, 404)

    def test_like_dislike_flow(self):
        alice = self._register("alice")
        bob = self._register("bob")
        post = self._create_post(alice, content="hi")
        like_url = f"/api/posts/{post['id']}/like"
        dislike_url = f"/api/posts/{post['id']}/dislike"

        liked = self.client.post(like_url, json=self._identity(bob))
        self.assertEqual(liked.status_code, 200)
        self.assertTrue(liked.get_json()["liked"])
        self.assertEqual(self._read_collection("posts")[0]["likedBy"], [bob["id"]])

        conflict = self.client.post(dislike_url, json=self._identity(bob))
        self.assertEqual(conflict.status_code, 409)
        self.assertEqual(conflict.get_json()["error"], "Remove like first")
        self.assertEqual(self._read_collection("posts")[0]["likedBy"], [bob["id"]])

        unliked = self.client.post(like_url, json=self._identity(bob))
        self.assertEqual(unliked.status_code, 200)
        self.assertFalse(unliked.get_json()["liked"])
        self.assertEqual(self._read_collection("posts")[0]["likedBy"], [])

        disliked = self.client.post(dislike_url, json=self._identity(bob))
        self.assertTrue(disliked.get_json()["disliked"])
        blocked = self.client.post(like_url, json=self._identity(bob))
        self.assertEqual(blocked.status_code, 409)
        self.assertEqual(blocked.get_json()["error"], "Remove dislike first")

    def test_reactions_accept_user_id_alone(self):
        alice = self._register("alice")
        bob = self._register("bob")
        post = self._create_post(alice, content="hi")

        liked = self.client.post(f"/api/posts/{post['id']}/like", json={"userId": bob["id"]})
        self.assertEqual(liked.status_code, 200)
        self.assertTrue(liked.get_json()["liked"])

        disliked = self.client.post(
            f"/api/posts/{post['id']}/dislike",
            json={"userId": alice["id"]},
        )
        self.assertEqual(disliked.status_code, 200)
        self.assertTrue(disliked.get_json()["disliked"])

        mismatched = self.client.post(
            f"/api/posts/{post['id']}/like",
            json={"userId": bob["id"], "username": "alice"},
        )
        self.assertEqual(mismatched.status_code, 401)

    def test_delete_and_clear_accept_user_id_alone(self):
        alice = self._register("alice")
        first = self._create_post(alice, content="one")
        self._create_post(alice, content="two")

        deleted = self.client.delete(f"/api/posts/{first['id']}", json={"userId": alice["id"]})
        self.assertEqual(deleted.status_code, 200)

        cleared = self.client.delete("/api/posts", json={"userId": alice["id"]})
        self.assertEqual(cleared.status_code, 200)
        self.assertEqual(cleared.get_json()["deleted"], 1)
        self.assertEqual(self.client.get("/api/posts").get_json(), [])

    def test_delete_by_unregistered_user_is_authorization_error(self):
        alice = self._register("alice")
        post = self._create_post(alice, content="hi")

        response = self.client.delete(
            f"/api/posts/{post['id']}",
            json={"userId": "ghost", "username": "ghost"},
        )
        self.assertEqual(response.status_code, 403)
        self.assertEqual(response.get_json()["error"], "Not authorized to delete this post")
        self.assertEqual(len(self.client.get("/api/posts").get_json()), 1)

    def test_clear_by_unregistered_user_is_not_found(self):
        response = self.client.delete("/api/posts", json={"userId": "ghost"})
        self.assertEqual(response.status_code, 404)

    def test_react_to_missing_post_is_404(self):
        bob = self._register("bob")
        response = self.client.post("/api/posts/missing/like", json=self._identity(bob))
        self.assertEqual(response.status_code, 404)

    def test_create_and_list_comments(self):
        alice = self._register("alice")
        bob = self._register("bob")
        post = self._create_post(alice, content="post with comments")

        created = self.client.post(
            f"/api/posts/{post['id']}/comments",
            json=dict(self._identity(bob), text="nice post"),
        )
        self.assertEqual(created.status_code, 201)
        comment = created.get_json()["comment"]
        self.assertEqual(comment["text"], "nice post")
        self.assertEqual(comment["user"], "bob")
        self.assertEqual(comment["userId"], bob["id"])

        listed = self.client.get(f"/api/posts/{post['id']}/comments")
        self.assertEqual(listed.status_code, 200)
        self.assertEqual(listed.get_json(), [comment])
        self.assertEqual(self._read_collection("posts")[0]["comments"], [comment])

    def test_comment_validation_and_missing_post(self):
        alice = self._register("alice")
        post = self._create_post(alice, content="hi")

        blank = self.client.post(
            f"/api/posts/{post['id']}/comments",
            json=dict(self._identity(alice), text=""),
        )
        self.assertEqual(blank.status_code, 400)

        missing = self.client.post(
            "/api/posts/missing/comments",
            json=dict(self._identity(alice), text="hello"),
        )
        self.assertEqual(missing.status_code, 404)

    def test_non_object_posts_are_served_as_empty(self):
        with open(os.path.join(self.data_dir, "posts.json"), "w", encoding="utf-8") as fh:
            json.dump([1, "x"], fh)

        with self.assertLogs("app.extensions.json_store", level="ERROR"):
            response = self.client.get("/api/posts")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), [])

    def test_corrupt_posts_file_is_served_as_empty(self):
        with open(os.path.join(self.data_dir, "posts.json"), "w", encoding="utf-8") as fh:
            fh.write("[{broken")

        with self.assertLogs("app.extensions.json_store", level="ERROR"):
            response = self.client.get("/api/posts")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), [])


if __name__ == "__main__":
    unittest.main()
