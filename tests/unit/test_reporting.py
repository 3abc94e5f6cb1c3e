import unittest
import os
import sys

# 添加项目根目录到Python路径
project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
sys.path.insert(0, project_root)

from sysmon.reporting.top_processes import format_process_line, top_by_memory
from sysmon.sampling.process_sampler import ProcessSample


def samples(*pairs):
    return [ProcessSample(name=name, cpu_time_ms=0.0, memory_mb=memory) for name, memory in pairs]


class TestTopByMemory(unittest.TestCase):
    """测试内存占用排行"""

    def test_scenario_with_ties(self):
        """内存相同时保持枚举顺序：B 在 C 之前"""
        data = samples(("A", 50.0), ("B", 80.0), ("C", 80.0), ("D", 10.0))
        top = top_by_memory(data, n=3)

        self.assertEqual(top, [("B", 80.0), ("C", 80.0), ("A", 50.0)])
        self.assertEqual(format_process_line(*top[0]), "B - 80.00 MB")

    def test_at_most_n_entries(self):
        data = samples(*[(f"p{i}", float(i)) for i in range(25)])
        top = top_by_memory(data)

        self.assertEqual(len(top), 10)
        self.assertEqual(top[0], ("p24", 24.0))
        self.assertEqual(top[-1], ("p15", 15.0))

    def test_fewer_samples_than_n(self):
        data = samples(("A", 1.0), ("B", 2.0))
        self.assertEqual(top_by_memory(data, n=10), [("B", 2.0), ("A", 1.0)])

    def test_non_increasing_and_stable(self):
        """结果按内存非递增排列，相同值保持原相对顺序"""
        data = samples(("x1", 5.0), ("y1", 7.0), ("x2", 5.0), ("z", 0.0), ("y2", 7.0), ("x3", 5.0))
        top = top_by_memory(data, n=6)

        memories = [memory for _, memory in top]
        self.assertEqual(memories, sorted(memories, reverse=True))
        self.assertEqual([name for name, _ in top], ["y1", "y2", "x1", "x2", "x3", "z"])

    def test_empty_and_zero_n(self):
        self.assertEqual(top_by_memory([], n=3), [])
        self.assertEqual(top_by_memory(samples(("A", 1.0)), n=0), [])

    def test_accepts_generator(self):
        top = top_by_memory(iter(samples(("A", 1.0), ("B", 3.0))), n=1)
        self.assertEqual(top, [("B", 3.0)])


class TestFormatProcessLine(unittest.TestCase):
    """测试输出格式"""

    def test_two_decimal_places(self):
        self.assertEqual(format_process_line("python", 123.456), "python - 123.46 MB")
        self.assertEqual(format_process_line("idle", 0.0), "idle - 0.00 MB")


if __name__ == '__main__':
    unittest.main()
