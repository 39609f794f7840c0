import sys
import threading
import unittest

from studydeck.db import InMemoryDbClient, NewChallenge, NewQuestion, NewUser
from studydeck.errors import ConstraintViolationError
from studydeck.seed_data import SEED_CHALLENGES, SEED_QUESTIONS


def _question(n: int) -> NewQuestion:
    return NewQuestion(category="Loops", question=f"q{n}", answer=f"a{n}")


class InMemoryDbClientTests(unittest.TestCase):
    def setUp(self):
        self.db = InMemoryDbClient()

    def test_preloaded_with_seed_content(self):
        questions = self.db.get_all_questions()
        challenges = self.db.get_all_challenges()
        self.assertEqual(len(questions), len(SEED_QUESTIONS))
        self.assertEqual(len(challenges), len(SEED_CHALLENGES))
        self.assertEqual([q.id for q in questions], list(range(1, len(questions) + 1)))
        self.assertEqual(challenges[0].title, "Basic For Loop")

    def test_seed_is_deterministic(self):
        other = InMemoryDbClient()
        self.assertEqual(self.db.get_all_questions(), other.get_all_questions())
        self.assertEqual(self.db.get_all_challenges(), other.get_all_challenges())

    def test_question_ids_continue_after_seed(self):
        record = self.db.create_question(_question(1))
        self.assertEqual(record.id, len(SEED_QUESTIONS) + 1)

    def test_question_ids_strictly_increase_across_deletes(self):
        ids = []
        for n in range(5):
            record = self.db.create_question(_question(n))
            ids.append(record.id)
            if n % 2 == 0:
                self.db.delete_question(record.id)
        self.db.delete_question(ids[-1])
        ids.append(self.db.create_question(_question(99)).id)

        self.assertEqual(ids, sorted(ids))
        self.assertEqual(len(ids), len(set(ids)))

    def test_delete_question_removes_it(self):
        record = self.db.create_question(_question(1))
        self.db.delete_question(record.id)
        self.assertNotIn(record.id, [q.id for q in self.db.get_all_questions()])

    def test_delete_missing_question_is_noop(self):
        before = self.db.get_all_questions()
        self.db.delete_question(12345)
        self.assertEqual(self.db.get_all_questions(), before)

    def test_questions_keep_insertion_order(self):
        first = self.db.create_question(_question(1))
        second = self.db.create_question(_question(2))
        tail = self.db.get_all_questions()[-2:]
        self.assertEqual([q.id for q in tail], [first.id, second.id])

    def test_challenge_round_trip_is_exact(self):
        fields = NewChallenge(
            title="  Foreach  ",
            description="Loop over $items.",
            initial_code="<?php\n$items = [1, 2];\n",
            solution="foreach ($items as $item) {\n    echo $item;\n}",
            hint="as",
        )
        record = self.db.create_challenge(fields)
        self.assertEqual(record.title, fields.title)
        self.assertEqual(record.description, fields.description)
        self.assertEqual(record.initial_code, fields.initial_code)
        self.assertEqual(record.solution, fields.solution)
        self.assertEqual(record.hint, fields.hint)
        self.assertEqual(record.id, len(SEED_CHALLENGES) + 1)

    def test_delete_challenge(self):
        self.db.delete_challenge(1)
        self.db.delete_challenge(999)
        ids = [c.id for c in self.db.get_all_challenges()]
        self.assertNotIn(1, ids)
        self.assertEqual(len(ids), len(SEED_CHALLENGES) - 1)
        self.assertEqual(
            self.db.create_challenge(
                NewChallenge("t", "d", "", "s", "h")
            ).id,
            len(SEED_CHALLENGES) + 1,
        )

    def test_create_and_lookup_user(self):
        user = self.db.create_user(NewUser(username="ada", password="secret"))
        self.assertTrue(user.id)

        by_name = self.db.get_user_by_username("ada")
        self.assertEqual(by_name.username, "ada")
        self.assertEqual(by_name.password, "secret")
        self.assertEqual(self.db.get_user(user.id), user)

    def test_user_lookups_return_none_when_absent(self):
        self.db.create_user(NewUser(username="ada", password="secret"))
        self.assertIsNone(self.db.get_user("missing"))
        self.assertIsNone(self.db.get_user_by_username("Ada"))

    def test_user_ids_are_unique_random_tokens(self):
        first = self.db.create_user(NewUser(username="a", password="x"))
        second = self.db.create_user(NewUser(username="b", password="x"))
        self.assertNotEqual(first.id, second.id)
        self.assertNotEqual(first.id, "1")

    def test_duplicate_username_rejected(self):
        self.db.create_user(NewUser(username="ada", password="secret"))
        with self.assertRaises(ConstraintViolationError):
            self.db.create_user(NewUser(username="ada", password="other"))

    def test_returned_records_are_copies(self):
        record = self.db.get_all_questions()[0]
        record.answer = "changed"
        self.assertNotEqual(self.db.get_all_questions()[0].answer, "changed")

    def test_reset_restores_seed(self):
        self.db.create_question(_question(1))
        self.db.create_user(NewUser(username="ada", password="secret"))
        self.db.reset()
        self.assertEqual(len(self.db.get_all_questions()), len(SEED_QUESTIONS))
        self.assertIsNone(self.db.get_user_by_username("ada"))
        self.assertEqual(
            self.db.create_question(_question(2)).id, len(SEED_QUESTIONS) + 1
        )

    def test_unseeded_client_starts_empty(self):
        db = InMemoryDbClient(seed=False)
        self.assertEqual(db.get_all_questions(), [])
        self.assertEqual(db.create_question(_question(1)).id, 1)


class InMemoryDbClientConcurrencyTests(unittest.TestCase):
    THREADS = 8
    PER_THREAD = 300

    def setUp(self):
        self.previous_interval = sys.getswitchinterval()
        sys.setswitchinterval(1e-6)

    def tearDown(self):
        sys.setswitchinterval(self.previous_interval)

    def _run_threads(self, target):
        barrier = threading.Barrier(self.THREADS)
        results = [None] * self.THREADS

        def worker(index):
            barrier.wait()
            results[index] = target(index)

        threads = [
            threading.Thread(target=worker, args=(i,)) for i in range(self.THREADS)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return results

    def test_concurrent_creates_get_unique_ids(self):
        db = InMemoryDbClient(seed=False)

        def create_many(index):
            return [
                db.create_question(_question(index * self.PER_THREAD + n)).id
                for n in range(self.PER_THREAD)
            ]

        ids = [i for batch in self._run_threads(create_many) for i in batch]
        total = self.THREADS * self.PER_THREAD
        self.assertEqual(len(set(ids)), total)
        self.assertEqual(sorted(ids), list(range(1, total + 1)))
        self.assertEqual(len(db.get_all_questions()), total)

    def test_concurrent_create_delete_create_loses_nothing(self):
        db = InMemoryDbClient(seed=False)

        def churn(index):
            kept = []
            for n in range(self.PER_THREAD):
                doomed = db.create_challenge(NewChallenge("t", "d", "", "s", "h"))
                db.delete_challenge(doomed.id)
                kept.append(
                    db.create_challenge(
                        NewChallenge(f"keep-{index}-{n}", "d", "", "s", "h")
                    ).id
                )
            return kept

        kept = [i for batch in self._run_threads(churn) for i in batch]
        self.assertEqual(len(set(kept)), len(kept))

        stored = db.get_all_challenges()
        self.assertEqual(sorted(c.id for c in stored), sorted(kept))
        self.assertTrue(all(c.title.startswith("keep-") for c in stored))
        self.assertEqual([c.id for c in stored], sorted(c.id for c in stored))


if __name__ == "__main__":
    unittest.main()
