from .entities import Resource

COURSE_RESOURCES: dict[str, tuple[Resource, ...]] = {
    "python": (
        Resource("Python.org Official Tutorial", "https://docs.python.org/3/tutorial/",
                 "The official Python tutorial from python.org"),
        Resource("Real Python", "https://realpython.com/",
                 "Comprehensive Python tutorials and articles"),
        Resource("Python for Everybody (Coursera)", "https://www.coursera.org/specializations/python",
                 "Free course by Dr. Charles Severance"),
    ),
    "c": (
        Resource("Learn-C.org", "https://www.learn-c.org/",
                 "Interactive C programming tutorial"),
        Resource("C Programming - GeeksforGeeks", "https://www.geeksforgeeks.org/c-programming-language/",
                 "Comprehensive C tutorials and examples"),
        Resource("CS50 - Harvard", "https://cs50.harvard.edu/x/",
                 "Harvard's introduction to computer science"),
    ),
    "java": (
        Resource("Oracle Java Tutorials", "https://docs.oracle.com/javase/tutorial/",
                 "Official Java documentation and tutorials"),
        Resource("Java Programming - MOOC.fi", "https://java-programming.mooc.fi/",
                 "Free Java course from University of Helsinki"),
        Resource("Java - W3Schools", "https://www.w3schools.com/java/",
                 "Interactive Java tutorial with examples"),
    ),
    "html": (
        Resource("MDN Web Docs - HTML", "https://developer.mozilla.org/en-US/docs/Web/HTML",
                 "Comprehensive HTML documentation"),
        Resource("W3Schools HTML Tutorial", "https://www.w3schools.com/html/",
                 "Beginner-friendly HTML tutorial"),
        Resource("FreeCodeCamp", "https://www.freecodecamp.org/",
                 "Free interactive HTML & web dev course"),
    ),
    "css": (
        Resource("MDN Web Docs - CSS", "https://developer.mozilla.org/en-US/docs/Web/CSS",
                 "Complete CSS reference and tutorials"),
        Resource("CSS-Tricks", "https://css-tricks.com/",
                 "Tips, tricks, and techniques on CSS"),
        Resource("Flexbox Froggy", "https://flexboxfroggy.com/",
                 "Learn CSS Flexbox through a game"),
    ),
    "javascript": (
        Resource("MDN JavaScript Guide", "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Guide",
                 "Comprehensive JavaScript documentation"),
        Resource("JavaScript.info", "https://javascript.info/",
                 "Modern JavaScript tutorial"),
        Resource("Eloquent JavaScript", "https://eloquentjavascript.net/",
                 "Free online book about JavaScript"),
    ),
    "dsa": (
        Resource("GeeksforGeeks DSA", "https://www.geeksforgeeks.org/data-structures/",
                 "Complete DSA tutorial and practice"),
        Resource("LeetCode", "https://leetcode.com/",
                 "Practice coding problems and algorithms"),
        Resource("Algorithms - Princeton", "https://www.coursera.org/learn/algorithms-part1",
                 "Free algorithms course on Coursera"),
    ),
    "cpp": (
        Resource("LearnCpp.com", "https://www.learncpp.com/",
                 "Free comprehensive C++ tutorial"),
        Resource("C++ Reference", "https://en.cppreference.com/",
                 "Complete C++ language reference"),
        Resource("C++ - GeeksforGeeks", "https://www.geeksforgeeks.org/c-plus-plus/",
                 "C++ tutorials and practice problems"),
    ),
    "react": (
        Resource("React Official Docs", "https://react.dev/",
                 "Official React documentation and tutorial"),
        Resource("React Tutorial - Scrimba", "https://scrimba.com/learn/learnreact",
                 "Interactive React course"),
        Resource("Full Stack Open", "https://fullstackopen.com/",
                 "Deep dive into modern web development"),
    ),
}


def resources_for(slug: str) -> list[Resource]:
    """Подборка ресурсов курса; для неизвестного slug пустой список"""
    return list(COURSE_RESOURCES.get(slug, ()))
