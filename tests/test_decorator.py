import asyncio
import unittest

from lrucache import Key, LRUCached


class TestLRUCached(unittest.TestCase):
    def test_sync_function(self):
        calls = 0

        @LRUCached(capacity=8)
        def double(x):
            nonlocal calls
            calls += 1
            return x * 2

        self.assertEqual(double(5), 10)
        self.assertEqual(double(5), 10)
        self.assertEqual(calls, 1)
        self.assertEqual(double(6), 12)
        self.assertEqual(calls, 2)
        self.assertEqual(double.__name__, 'double')

    def test_async_function(self):
        calls = 0

        @LRUCached(capacity=8)
        async def fetch(x):
            nonlocal calls
            calls += 1
            await asyncio.sleep(0.01)
            return x * 3

        async def _test():
            self.assertEqual(await fetch(5), 15)
            self.assertEqual(await fetch(5), 15)
            self.assertEqual(await fetch(x=5), 15)
        asyncio.run(_test())
        # positional and keyword calls are different keys
        self.assertEqual(calls, 2)

    def test_use_cache_false_refreshes(self):
        results = iter([1, 2, 3])

        @LRUCached()
        def next_value():
            return next(results)

        self.assertEqual(next_value(), 1)
        self.assertEqual(next_value(), 1)
        self.assertEqual(next_value(use_cache=False), 2)
        self.assertEqual(next_value(), 2)

    def test_none_result_is_cached(self):
        calls = 0

        @LRUCached()
        def nothing():
            nonlocal calls
            calls += 1

        nothing()
        nothing()
        self.assertEqual(calls, 1)

    def test_skip_args(self):
        calls = 0

        class Repo:
            @LRUCached(capacity=8, skip_args=1)
            def load(self, x):
                nonlocal calls
                calls += 1
                return x * 2

        self.assertEqual(Repo().load(5), Repo().load(5))
        self.assertEqual(calls, 1)

    def test_invalidate_and_clear(self):
        calls = 0

        @LRUCached()
        def square(x):
            nonlocal calls
            calls += 1
            return x * x

        square(2)
        square(3)
        self.assertTrue(square.invalidate_cache(2))
        self.assertFalse(square.invalidate_cache(2))
        square(2)
        square(3)
        self.assertEqual(calls, 3)
        square.cache_clear()
        self.assertEqual(square.cache_info()['size'], 0)
        square(3)
        self.assertEqual(calls, 4)

    def test_eviction(self):
        @LRUCached(capacity=4)
        def ident(x):
            return x

        for i in range(10):
            ident(i)
        self.assertEqual(ident.cache_info(), {'size': 4, 'capacity': 3})
        self.assertEqual(ident.lru.keys()[0], Key((9,)))

    def test_unhashable_arguments(self):
        calls = 0

        @LRUCached()
        def total(values, opts=None):
            nonlocal calls
            calls += 1
            return sum(values)

        self.assertEqual(total([1, 2, 3], opts={'a': [1]}), 6)
        self.assertEqual(total([1, 2, 3], opts={'a': [1]}), 6)
        self.assertEqual(calls, 1)

    def test_errors_are_not_cached(self):
        calls = 0

        @LRUCached()
        def flaky():
            nonlocal calls
            calls += 1
            raise ValueError('boom')

        for _ in range(2):
            with self.assertRaises(ValueError):
                flaky()
        self.assertEqual(calls, 2)
        self.assertEqual(flaky.cache_info()['size'], 0)


class TestKey(unittest.TestCase):
    def test_equal_keys(self):
        self.assertEqual(Key((1, 'a'), {'x': 1, 'y': 2}), Key((1, 'a'), {'y': 2, 'x': 1}))
        self.assertEqual(hash(Key((1,))), hash(Key((1,))))

    def test_different_keys(self):
        self.assertNotEqual(Key((1,)), Key((2,)))
        self.assertNotEqual(Key((1,)), Key((), {'x': 1}))
        self.assertNotEqual(Key(([1],)), Key(((1,),)))
        self.assertNotEqual(Key((1,)), (1,))

    def test_unhashable_parts(self):
        key = Key(([1, 2], {'a': {3}}))
        self.assertEqual(key, Key(([1, 2], {'a': {3}})))
        self.assertIsInstance(hash(key), int)


if __name__ == '__main__':
    unittest.main()
