"""常量表 - 由 export 写入、由词法分析器读取"""
import threading
from collections.abc import Mapping


class StoredConstant:
    """export 成功后返回的记录"""

    __slots__ = ('name', 'value')

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, StoredConstant):
            return NotImplemented
        return (self.name, self.value) == (other.name, other.value)

    def __repr__(self):
        return f"StoredConstant(name={self.name!r}, value={self.value!r})"


class ConstantTable(Mapping):
    """
    名称 -> float 的映射（区分大小写）

    只能新增或覆盖，不能删除；读写都在锁内进行，
    多线程宿主可以共享同一张表
    """

    def __init__(self, initial=None):
        self._lock = threading.RLock()
        self._values = {}
        if initial:
            for name, value in dict(initial).items():
                self.store(name, value)

    def store(self, name, value):
        with self._lock:
            self._values[name] = float(value)
        return StoredConstant(name, float(value))

    def __getitem__(self, name):
        with self._lock:
            return self._values[name]

    def __contains__(self, name):
        with self._lock:
            return name in self._values

    def __iter__(self):
        with self._lock:
            return iter(list(self._values))

    def __len__(self):
        with self._lock:
            return len(self._values)

