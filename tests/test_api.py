# -*- coding: utf-8 -*-

from __future__ import annotations

import itertools
import os
import shutil
import sys
import tempfile
import threading
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

_counter = itertools.count(1)


class _ApiTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls._tmp = Path(tempfile.mkdtemp(prefix="swasthya-test-"))
        data_root = cls._tmp / "data"
        os.environ["SWASTHYA_DATA_ROOT"] = str(data_root)
        os.environ["SWASTHYA_DB_PATH"] = str(data_root / "swasthya.db")
        os.environ["SWASTHYA_JWT_SECRET"] = "test-secret"

        # Ensure settings/app reflect the env vars above.
        for name in list(sys.modules.keys()):
            if name.startswith("swasthya."):
                sys.modules.pop(name, None)

        from swasthya.api import app  # noqa: WPS433 (import inside test for env control)

        cls.app = app
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()
        shutil.rmtree(cls._tmp, ignore_errors=True)

    def _signup_payload(self, **overrides) -> dict:
        n = next(_counter)
        payload = {
            "firstName": "Asha",
            "lastName": "Rao",
            "email": f"asha{n}@example.com",
            "phone": f"+9198765{n:05d}",
            "password": "password123",
            "age": 25,
            "gender": "female",
            "height": 165,
            "weight": 60,
            "dietaryPreference": "vegetarian",
            "city": "Pune",
        }
        payload.update(overrides)
        return payload

    def _new_user(self, **overrides) -> dict:
        payload = self._signup_payload(**overrides)
        resp = self.client.post("/api/auth/signup", json=payload)
        self.assertEqual(resp.status_code, 201, resp.text)
        body = resp.json()
        return {
            "payload": payload,
            "user": body["user"],
            "headers": {"Authorization": f"Bearer {body['token']}"},
        }


class TestAuthApi(_ApiTestCase):
    def test_signup_derives_calorie_goal(self) -> None:
        account = self._new_user()
        user = account["user"]
        self.assertEqual(user["fullName"], "Asha Rao")
        self.assertEqual(user["age"], 25)
        self.assertEqual(user["dailyCaloriesGoal"], 2108)
        self.assertEqual(user["dailyStepsGoal"], 10000)
        self.assertEqual(user["dailyWaterGoal"], 8)
        self.assertEqual(user["bmiCategory"], "Normal")
        self.assertNotIn("password", user)
        self.assertNotIn("passwordHash", user)

    def test_signup_keeps_explicit_calorie_goal(self) -> None:
        account = self._new_user(dailyCaloriesGoal=1800)
        self.assertEqual(account["user"]["dailyCaloriesGoal"], 1800)

    def test_duplicate_email_or_phone(self) -> None:
        account = self._new_user()
        again = self._signup_payload(email=account["payload"]["email"])
        resp = self.client.post("/api/auth/signup", json=again)
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()["success"])

        again = self._signup_payload(phone=account["payload"]["phone"])
        resp = self.client.post("/api/auth/signup", json=again)
        self.assertEqual(resp.status_code, 400)

    def test_signup_validation_reports_fields(self) -> None:
        resp = self.client.post("/api/auth/signup", json=self._signup_payload(age=10, height=90))
        self.assertEqual(resp.status_code, 400)
        body = resp.json()
        self.assertEqual(body["message"], "Validation failed")
        fields = {err["field"] for err in body["errors"]}
        self.assertIn("age", fields)
        self.assertIn("height", fields)

    def test_login(self) -> None:
        account = self._new_user()
        email = account["payload"]["email"]

        resp = self.client.post("/api/auth/login", json={"email": email, "password": "password123"})
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.json()["token"])

        wrong = self.client.post("/api/auth/login", json={"email": email, "password": "nope-nope"})
        unknown = self.client.post("/api/auth/login", json={"email": "ghost@example.com", "password": "nope-nope"})
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.json()["message"], unknown.json()["message"])

    def test_verify_token(self) -> None:
        account = self._new_user()
        resp = self.client.get("/api/auth/verify-token", headers=account["headers"])
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["user"]["id"], account["user"]["id"])

        self.assertEqual(self.client.get("/api/auth/verify-token").status_code, 401)
        resp = self.client.get("/api/auth/verify-token", headers={"Authorization": "Bearer a.b.c"})
        self.assertEqual(resp.status_code, 401)

    def test_forgot_password_does_not_enumerate(self) -> None:
        account = self._new_user()
        known = self.client.post("/api/auth/forgot-password", json={"email": account["payload"]["email"]})
        unknown = self.client.post("/api/auth/forgot-password", json={"email": "ghost@example.com"})
        self.assertEqual(known.status_code, 200)
        self.assertEqual(known.json(), unknown.json())


class TestUsersApi(_ApiTestCase):
    def test_profile_update(self) -> None:
        account = self._new_user()
        resp = self.client.put(
            "/api/users/profile",
            json={"weight": 72.5, "city": "Mysuru", "notifications": {"sms": True}},
            headers=account["headers"],
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        user = resp.json()["data"]
        self.assertEqual(user["weight"], 72.5)
        self.assertEqual(user["city"], "Mysuru")
        self.assertTrue(user["notifications"]["sms"])
        self.assertTrue(user["notifications"]["waterReminder"])
        # Calorie goal is fixed at signup.
        self.assertEqual(user["dailyCaloriesGoal"], account["user"]["dailyCaloriesGoal"])

        resp = self.client.get("/api/users/profile", headers=account["headers"])
        self.assertEqual(resp.json()["data"]["city"], "Mysuru")

    def test_goals_seed_new_logs(self) -> None:
        account = self._new_user()
        resp = self.client.put("/api/users/goals", json={"dailyWaterGoal": 10}, headers=account["headers"])
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["dailyWaterGoal"], 10)

        for _ in range(2):
            resp = self.client.post("/api/health/water", json={"glasses": 4}, headers=account["headers"])
        data = resp.json()["data"]
        self.assertEqual(data["totalGlasses"], 8)
        self.assertFalse(data["goalAchieved"])

    def test_zero_steps_goal_is_kept_on_new_logs(self) -> None:
        account = self._new_user()
        resp = self.client.put("/api/users/goals", json={"dailyStepsGoal": 0}, headers=account["headers"])
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["dailyStepsGoal"], 0)

        log = self.client.get("/api/health/today", headers=account["headers"]).json()["data"]
        self.assertEqual(log["steps"]["goal"], 0)
        self.assertTrue(log["summary"]["goalsAchieved"]["steps"])


class TestHealthApi(_ApiTestCase):
    def test_requires_token(self) -> None:
        resp = self.client.get("/api/health/today")
        self.assertEqual(resp.status_code, 401)
        self.assertFalse(resp.json()["success"])

    def test_today_created_on_demand(self) -> None:
        account = self._new_user()
        first = self.client.get("/api/health/today", headers=account["headers"]).json()["data"]
        second = self.client.get("/api/health/today", headers=account["headers"]).json()["data"]
        self.assertEqual(first["id"], second["id"])
        self.assertEqual(first["userId"], account["user"]["id"])
        self.assertEqual(first["summary"]["netCalories"], 0)
        self.assertEqual(first["steps"]["goal"], 10000)

    def test_water_accumulates(self) -> None:
        account = self._new_user()
        resp = self.client.post("/api/health/water", json={"glasses": 3}, headers=account["headers"])
        self.assertEqual(resp.status_code, 200)
        resp = self.client.post("/api/health/water", json={"glasses": 2}, headers=account["headers"])
        data = resp.json()["data"]
        self.assertEqual(data["totalGlasses"], 5)
        self.assertFalse(data["goalAchieved"])

        resp = self.client.post("/api/health/water", json={"glasses": 3}, headers=account["headers"])
        self.assertTrue(resp.json()["data"]["goalAchieved"])

        resp = self.client.post("/api/health/water", json={"glasses": 6}, headers=account["headers"])
        self.assertEqual(resp.status_code, 400)

    def test_steps_goal(self) -> None:
        account = self._new_user()
        resp = self.client.post("/api/health/steps", json={"count": 6000}, headers=account["headers"])
        self.assertFalse(resp.json()["data"]["goalAchieved"])
        resp = self.client.post(
            "/api/health/steps", json={"count": 4000, "source": "fitbit"}, headers=account["headers"]
        )
        data = resp.json()["data"]
        self.assertEqual(data["totalSteps"], 10000)
        self.assertTrue(data["goalAchieved"])

        log = self.client.get("/api/health/today", headers=account["headers"]).json()["data"]
        self.assertEqual([e["source"] for e in log["steps"]["entries"]], ["manual", "fitbit"])
        self.assertTrue(log["summary"]["goalsAchieved"]["steps"])

    def test_meal_and_exercise_summary(self) -> None:
        account = self._new_user()
        headers = account["headers"]
        resp = self.client.post(
            "/api/health/meal",
            json={
                "type": "lunch",
                "foods": [
                    {"name": "Roti (Chapati)", "calories": 104, "quantity": {"amount": 1, "unit": "pieces"}},
                    {"name": "Dal Tadka", "calories": 184, "nutrients": {"protein": 9}},
                ],
            },
            headers=headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["data"], {"mealCalories": 288, "totalDailyCalories": 288})

        resp = self.client.post(
            "/api/health/meal",
            json={"type": "dinner", "foods": [{"name": "Rice (1 cup cooked)", "calories": 205}]},
            headers=headers,
        )
        self.assertEqual(resp.json()["data"]["totalDailyCalories"], 493)

        resp = self.client.post(
            "/api/health/exercise",
            json={"type": "running", "duration": 30, "intensity": "vigorous"},
            headers=headers,
        )
        self.assertEqual(resp.json()["data"], {"caloriesBurned": 360, "totalExerciseMinutes": 30})

        resp = self.client.post(
            "/api/health/exercise",
            json={"type": "yoga", "duration": 15, "caloriesBurned": 40},
            headers=headers,
        )
        self.assertEqual(resp.json()["data"], {"caloriesBurned": 40, "totalExerciseMinutes": 45})

        summary = self.client.get("/api/health/today", headers=headers).json()["data"]["summary"]
        self.assertEqual(summary["totalCaloriesConsumed"], 493)
        self.assertEqual(summary["totalCaloriesBurned"], 400)
        self.assertEqual(summary["netCalories"], 93)
        self.assertTrue(summary["goalsAchieved"]["exercise"])
        self.assertTrue(summary["goalsAchieved"]["calories"])

    def test_meal_validation(self) -> None:
        account = self._new_user()
        resp = self.client.post("/api/health/meal", json={"type": "lunch", "foods": []}, headers=account["headers"])
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post(
            "/api/health/meal",
            json={"type": "brunch", "foods": [{"name": "Upma", "calories": 251}]},
            headers=account["headers"],
        )
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post(
            "/api/health/exercise", json={"type": "running", "duration": 0}, headers=account["headers"]
        )
        self.assertEqual(resp.status_code, 400)

    def test_sleep_replaces_record(self) -> None:
        account = self._new_user()
        headers = account["headers"]
        resp = self.client.post("/api/health/sleep", json={"hours": 6, "quality": "poor"}, headers=headers)
        self.assertFalse(resp.json()["data"]["goalAchieved"])
        resp = self.client.post("/api/health/sleep", json={"hours": 7.5, "quality": "good"}, headers=headers)
        data = resp.json()["data"]
        self.assertEqual(data["sleepHours"], 7.5)
        self.assertEqual(data["sleepQuality"], "good")
        self.assertTrue(data["goalAchieved"])

        resp = self.client.post("/api/health/sleep", json={"hours": 25}, headers=headers)
        self.assertEqual(resp.status_code, 400)

    def test_vitals_mood_symptoms_medications(self) -> None:
        account = self._new_user()
        headers = account["headers"]
        resp = self.client.post(
            "/api/health/vitals",
            json={"bloodPressure": {"systolic": 120, "diastolic": 80}, "temperature": 36.8},
            headers=headers,
        )
        vitals = resp.json()["data"]
        self.assertEqual(vitals["bloodPressure"]["systolic"], 120)
        self.assertIsNotNone(vitals["bloodPressure"]["timestamp"])
        self.assertEqual(vitals["temperature"]["value"], 36.8)

        resp = self.client.post(
            "/api/health/measurements", json={"weight": 61.2, "waist": 74}, headers=headers
        )
        measurements = resp.json()["data"]
        self.assertEqual(measurements["weight"]["value"], 61.2)
        self.assertEqual(measurements["waist"], 74)

        resp = self.client.post(
            "/api/health/mood", json={"rating": 8, "emotions": ["happy", "energetic"]}, headers=headers
        )
        self.assertEqual(resp.json()["data"]["emotions"], ["happy", "energetic"])

        self.client.post("/api/health/symptoms", json={"name": "Headache", "severity": "mild"}, headers=headers)
        resp = self.client.post("/api/health/medications", json={"name": "Paracetamol", "dosage": "500mg"}, headers=headers)
        self.assertEqual(len(resp.json()["data"]), 1)
        self.assertIsNotNone(resp.json()["data"][0]["timeTaken"])

        log = self.client.get("/api/health/today", headers=headers).json()["data"]
        self.assertEqual(log["symptoms"][0]["name"], "Headache")
        self.assertEqual(log["mood"]["rating"], 8)

    def test_summary_rating(self) -> None:
        account = self._new_user()
        resp = self.client.put(
            "/api/health/today/summary", json={"overallRating": 4, "notes": "Felt great"}, headers=account["headers"]
        )
        summary = resp.json()["data"]["summary"]
        self.assertEqual(summary["overallRating"], 4)
        self.assertEqual(summary["notes"], "Felt great")

        # Derived fields recompute without clobbering the rating.
        self.client.post("/api/health/water", json={"glasses": 1}, headers=account["headers"])
        summary = self.client.get("/api/health/today", headers=account["headers"]).json()["data"]["summary"]
        self.assertEqual(summary["overallRating"], 4)

    def test_history(self) -> None:
        account = self._new_user()
        headers = account["headers"]
        self.client.post("/api/health/water", json={"glasses": 2}, headers=headers)

        resp = self.client.get("/api/health/history/7", headers=headers)
        logs = resp.json()["data"]
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0]["water"]["glasses"], 2)

        resp = self.client.get("/api/health/history/not-a-number", headers=headers)
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.json()["data"]), 1)

        other = self._new_user()
        resp = self.client.get("/api/health/history/30", headers=other["headers"])
        self.assertEqual(resp.json()["data"], [])

    def test_history_reads_leading_digits(self) -> None:
        account = self._new_user()
        self.client.post("/api/health/steps", json={"count": 500}, headers=account["headers"])
        resp = self.client.get("/api/health/history/30days", headers=account["headers"])
        self.assertEqual(resp.status_code, 200)
        logs = resp.json()["data"]
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0]["steps"]["count"], 500)

    def test_concurrent_water_posts_all_land(self) -> None:
        account = self._new_user()
        writers = 8
        barrier = threading.Barrier(writers)
        statuses = []

        def post_water() -> None:
            with TestClient(self.app) as client:
                barrier.wait(timeout=30)
                resp = client.post("/api/health/water", json={"glasses": 1}, headers=account["headers"])
                statuses.append(resp.status_code)

        threads = [threading.Thread(target=post_water) for _ in range(writers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=30)

        self.assertEqual(statuses, [200] * writers)
        water = self.client.get("/api/health/today", headers=account["headers"]).json()["data"]["water"]
        self.assertEqual(water["glasses"], writers)
        self.assertEqual(len(water["entries"]), writers)

    def test_indian_foods(self) -> None:
        account = self._new_user()
        resp = self.client.get("/api/health/indian-foods", headers=account["headers"])
        foods = resp.json()["data"]
        self.assertEqual(len(foods), 16)
        self.assertEqual(foods[0], {
            "name": "Roti (Chapati)",
            "calories": 104,
            "category": "staple",
            "region": "North Indian",
            "isVeg": True,
        })

        resp = self.client.get("/api/health/indian-foods?category=snack", headers=account["headers"])
        self.assertEqual(len(resp.json()["data"]), 3)
        resp = self.client.get("/api/health/indian-foods?q=dosa", headers=account["headers"])
        self.assertEqual([f["name"] for f in resp.json()["data"]], ["Dosa (Plain)"])

        resp = self.client.get("/api/health/indian-foods")
        self.assertEqual(resp.status_code, 401)

    def test_health_check_is_public(self) -> None:
        resp = self.client.get("/api/health-check")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "OK")


if __name__ == "__main__":
    unittest.main()
