from setuptools import find_namespace_packages, setup


def _fetch_requirements(path: str) -> list[str]:
    with open(path, encoding='utf-8') as fd:
        return [r.strip() for r in fd.readlines() if r.strip() and not r.startswith('#')]


setup(
    name='whiterabbit',
    version='0.2.0',
    author='White Rabbit Team',
    description='vLLM emulator serving mock OpenAI-compatible responses',
    packages=find_namespace_packages(include=['whiterabbit*']),
    include_package_data=True,
    install_requires=_fetch_requirements('requirements.txt'),
    extras_require={'test': ['pytest>=7', 'httpx', 'openai>=1.0']},
    entry_points={'console_scripts': ['whiterabbit=whiterabbit.cli:main']},
    python_requires='>=3.10',
)
