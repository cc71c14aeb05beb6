from properties.generators import (
    GeneratorConfig,
    SequenceGenerator,
    SimilarSequenceGenerator,
    PopularSequenceGenerator,
    EdgeCaseGenerator,
    TestCaseGenerator,
    DiffTestCase,
    generate_test_cases
)


__all__ = [
    "GeneratorConfig",
    "SequenceGenerator",
    "SimilarSequenceGenerator",
    "PopularSequenceGenerator",
    "EdgeCaseGenerator",
    "TestCaseGenerator",
    "DiffTestCase",
    "generate_test_cases"
]
