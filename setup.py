import os
import subprocess
from setuptools import find_packages, setup


def read(fname):
    with open(
        os.path.join(os.path.dirname(os.path.abspath(__file__)), fname), "rb"
    ) as fid:
        return fid.read().decode("utf-8")


def output(cmd):
    return subprocess.check_output(cmd, shell=True).decode("utf-8").strip()


def requirements(fname):
    return [
        line.strip()
        for line in read(fname).splitlines()
        if line.strip() and not line.startswith(("#", "-r"))
    ]


try:
    version = read("version").strip()
except IOError:
    # git_version will be <tag>-<n>-g<sha> when the current commit
    # is not the last tag, otherwise it is simply the last tag
    git_version = output("git describe --tags")
    if "-" in git_version:
        tag_version, n_commits, commit_sha = git_version.split("-")
        version = "{tag_version}.post{n_commits}".format(**locals())
    else:
        version = git_version


setup(
    name="seqkit",
    version=version,
    description="FIFO sequential queue and small collection helpers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements("requirements.txt"),
    extras_require={"test": requirements("requirements-tests.txt")},
    python_requires=">=3.7",
    zip_safe=False,
)
