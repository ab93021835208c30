from absl.testing import absltest
from absl.testing import parameterized

from pellsolver.bigint import is_square
from pellsolver.chakravala import solve_pell
from pellsolver.verify import is_fundamental, is_solution, reference_solution


class VerifyTest(parameterized.TestCase):

    @parameterized.parameters((2, 3, 2), (13, 649, 180), (61, 1766319049, 226153980))
    def testIsSolution(self, n, x, y):
        self.assertTrue(is_solution(n, x, y))
        self.assertFalse(is_solution(n, x + 1, y))

    def testTrivialSolutionExcluded(self):
        self.assertFalse(is_solution(2, 1, 0))

    def testNonFundamentalDetected(self):
        # (3 + 2*sqrt 2)^2 = 17 + 12*sqrt 2
        self.assertTrue(is_solution(2, 17, 12))
        self.assertFalse(is_fundamental(2, 17, 12))
        self.assertTrue(is_fundamental(2, 3, 2))

    def testBruteLimit(self):
        with self.assertRaises(ValueError):
            is_fundamental(61, 1766319049, 226153980, brute_limit=1000)

    def testReferenceSolution(self):
        self.assertEqual((1766319049, 226153980), reference_solution(61))


class FundamentalTest(absltest.TestCase):

    def testAgreesWithSympyUpTo200(self):
        for n in range(2, 201):
            if is_square(n):
                continue
            self.assertEqual(reference_solution(n), solve_pell(n), msg=f"N={n}")

    def testBruteForceFundamentalWhereFeasible(self):
        checked = 0
        for n in range(2, 201):
            if is_square(n):
                continue
            x, y = solve_pell(n)
            if y > 20000:
                continue
            self.assertTrue(is_fundamental(n, x, y), msg=f"N={n}")
            checked += 1
        self.assertGreater(checked, 40)


if __name__ == "__main__":
    absltest.main()
