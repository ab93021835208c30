import io
import sys

from absl.testing import absltest

from pellsolver import cli


class CliTest(absltest.TestCase):

    def _run(self, argv, stdin=""):
        out, err = io.StringIO(), io.StringIO()
        old = sys.stdin, sys.stdout, sys.stderr
        sys.stdin, sys.stdout, sys.stderr = io.StringIO(stdin), out, err
        try:
            rc = cli.main(argv)
        finally:
            sys.stdin, sys.stdout, sys.stderr = old
        return rc, out.getvalue(), err.getvalue()

    def testSolvesArgument(self):
        rc, out, _ = self._run(["61"])
        self.assertEqual(0, rc)
        self.assertIn("x = 1766319049", out)
        self.assertIn("y = 226153980", out)
        self.assertIn("check: x^2 - 61*y^2 = 1", out)

    def testTsvAndCheck(self):
        rc, out, _ = self._run(["--tsv", "--check", "2", "13"])
        self.assertEqual(0, rc)
        rows = [line.split("\t") for line in out.splitlines()]
        self.assertEqual(["2", "3", "2"], rows[0][:3])
        self.assertEqual(["13", "649", "180"], rows[1][:3])

    def testTrace(self):
        rc, out, _ = self._run(["--trace", "61"])
        self.assertEqual(0, rc)
        self.assertIn("start (a=8, b=1, k=3)", out)
        self.assertIn("m=7 -> (a=39, b=5, k=-4)", out)

    def testErrorsGiveNonZeroExit(self):
        rc, out, err = self._run(["--tsv", "4", "2"])
        self.assertEqual(1, rc)
        self.assertIn("PerfectSquare", err)
        self.assertTrue(out.startswith("2\t3\t2"))

    def testStdin(self):
        rc, out, err = self._run(["--tsv"], stdin="5\n\n# comment\nabc\n")
        self.assertEqual(1, rc)
        self.assertTrue(out.startswith("5\t9\t4"))
        self.assertIn("# skip: abc", err)


if __name__ == "__main__":
    absltest.main()
