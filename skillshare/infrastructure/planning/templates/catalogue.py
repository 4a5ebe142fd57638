"""Predefined learning plan templates installed at startup."""

from skillshare.domain.planning.entities.resource import ResourceType
from skillshare.domain.planning.outlines import (
    ModuleOutline,
    PlanOutline,
    ResourceOutline,
    TaskOutline,
)

JAVA_DEVELOPMENT_PATH = PlanOutline(
    title="Java Development Learning Path",
    description="A comprehensive path to learn Java development from basics to advanced topics",
    category="Programming",
    estimated_hours=120,
    modules=(
        ModuleOutline(
            title="Java Basics",
            description="Learn the fundamentals of Java programming",
            estimated_hours=20,
            tasks=(
                TaskOutline(
                    title="Java Syntax and Structure",
                    description="Learn about Java syntax, variables, and basic operations",
                    estimated_minutes=120,
                    resources=(
                        ResourceOutline(
                            title="Java Programming for Beginners",
                            type=ResourceType.ARTICLE,
                            url="https://example.com/java-beginners",
                            notes="Good introduction to Java syntax",
                        ),
                    ),
                ),
                TaskOutline(
                    title="Control Flow in Java",
                    description="Learn about if-else statements, loops, and switch statements",
                    estimated_minutes=180,
                    resources=(
                        ResourceOutline(
                            title="Control Flow in Java",
                            type=ResourceType.VIDEO,
                            url="https://example.com/java-control-flow",
                            notes="Complete tutorial on control flow statements",
                        ),
                    ),
                ),
            ),
        ),
        ModuleOutline(
            title="Object-Oriented Programming",
            description="Learn OOP principles in Java",
            estimated_hours=25,
            tasks=(
                TaskOutline(
                    title="Classes and Objects",
                    description="Learn how to create and use classes and objects in Java",
                    estimated_minutes=240,
                    resources=(
                        ResourceOutline(
                            title="Java Classes and Objects",
                            type=ResourceType.VIDEO,
                            url="https://example.com/java-classes",
                            notes="Detailed explanation of classes and objects",
                        ),
                    ),
                ),
                TaskOutline(
                    title="Inheritance and Polymorphism",
                    description="Learn about inheritance, interfaces, and polymorphism",
                    estimated_minutes=300,
                    resources=(
                        ResourceOutline(
                            title="Java Inheritance Tutorial",
                            type=ResourceType.ARTICLE,
                            url="https://example.com/java-inheritance",
                            notes="Comprehensive guide to inheritance",
                        ),
                        ResourceOutline(
                            title="Polymorphism in Java",
                            type=ResourceType.VIDEO,
                            url="https://example.com/java-polymorphism",
                            notes="Video tutorial on polymorphism",
                        ),
                    ),
                ),
            ),
        ),
    ),
)

SPRING_BOOT_DEVELOPMENT_PATH = PlanOutline(
    title="Spring Boot Development Path",
    description="Learn Spring Boot framework for building enterprise applications",
    category="Web Development",
    estimated_hours=80,
    modules=(
        ModuleOutline(
            title="Spring Boot Fundamentals",
            description="Learn the fundamentals of Spring Boot framework",
            estimated_hours=15,
            tasks=(
                TaskOutline(
                    title="Spring Boot Introduction",
                    description="Introduction to Spring Boot framework and its benefits",
                    estimated_minutes=180,
                    resources=(
                        ResourceOutline(
                            title="Spring Boot Introduction",
                            type=ResourceType.ARTICLE,
                            url="https://example.com/spring-boot-intro",
                            notes="Official Spring Boot documentation",
                        ),
                    ),
                ),
                TaskOutline(
                    title="Creating RESTful APIs",
                    description="Learn how to create RESTful APIs with Spring Boot",
                    estimated_minutes=240,
                    resources=(
                        ResourceOutline(
                            title="Building a RESTful Web Service",
                            type=ResourceType.EXERCISE,
                            url="https://example.com/spring-boot-rest",
                            notes="Hands-on tutorial for building RESTful APIs",
                        ),
                    ),
                ),
            ),
        ),
    ),
)

PREDEFINED_TEMPLATES: tuple[PlanOutline, ...] = (
    JAVA_DEVELOPMENT_PATH,
    SPRING_BOOT_DEVELOPMENT_PATH,
)
