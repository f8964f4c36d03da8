
from setuptools import setup, find_packages

setup(
    name='travel_doc_parser',
    version='0.1.0',
    packages=find_packages(exclude=['tests']),
    package_data={'travel_doc_parser': ['rules.yaml']},
    python_requires='>=3.8',
    install_requires=[
        'click',
        'regex',
        'rapidfuzz',
        'PyYAML',
        'pdfminer.six',
        'pdf2image',
        'pytesseract',
        'Pillow',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'travel-doc-parser=travel_doc_parser.cli:main'
        ]
    }
)
