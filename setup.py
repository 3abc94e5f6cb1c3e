from setuptools import setup, find_packages
import os

def read_file(filename):
    """读取文件内容"""
    with open(os.path.join(os.path.dirname(__file__), filename), 'r', encoding='utf-8') as f:
        return f.read()

setup(
    name="simple-system-monitor",
    version="1.0.0",
    author="System Tools Team",
    author_email="tools@example.com",
    description="简易控制台系统监控：周期显示CPU使用率和内存占用最高的进程并写入记录文件",
    long_description=read_file('README.md'),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "sysmon = sysmon.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: System Administrators",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Monitoring",
    ],
    python_requires=">=3.8",
    install_requires=[
        line.strip() for line in read_file('requirements.txt').splitlines()
        if line.strip() and not line.startswith('#')
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
