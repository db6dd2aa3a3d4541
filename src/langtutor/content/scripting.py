"""
Lesson content for scripting languages (JavaScript, TypeScript, Python).
"""

from langtutor.content._helpers import lessons
from langtutor.content.general import general_purpose_lessons
from langtutor.core.models import SectionSpec


def _is_typescript(name: str) -> bool:
    lowered = name.lower()
    return "typescript" in lowered or lowered.strip() == "ts"


def scripting_specs(name: str) -> list[SectionSpec]:
    """
    Lessons for JavaScript and TypeScript.

    Snippets are typed when the display name mentions TypeScript.
    """
    ts = _is_typescript(name)
    records = (
        {
            "title": "Introduction to {name}",
            "description": "{name} is " + ("a typed superset of JavaScript that compiles to plain JavaScript." if ts else "the programming language of the web, running in browsers and on servers."),
            "syntax": 'let name: string = "value";' if ts else 'let name = "value";',
            "usage": "Build interactive web applications",
            "code": (
                '// TypeScript\nlet name: string = "Alice";\nfunction greet(person: string): string {\n  return `Hello, ${person}!`;\n}\nconsole.log(greet(name));'
                if ts
                else '// JavaScript\nlet name = "Alice";\nfunction greet(person) {\n  return `Hello, ${person}!`;\n}\nconsole.log(greet(name));'
            ),
        },
        {
            "title": "Variables",
            "description": "Use let for values that change and const for values that do not.",
            "syntax": "let, const",
            "usage": "Store data",
            "code": "const PI = 3.14;\nlet score = 0;\nscore += 10;",
        },
        {
            "title": "Data Types",
            "description": "Strings, numbers, booleans, arrays and objects cover most everyday data.",
            "syntax": "string, number, boolean, array, object",
            "usage": "Different types for different data",
            "code": (
                'let str: string = "hello";\nlet num: number = 42;\nlet arr: number[] = [1, 2, 3];\nlet obj: { name: string } = { name: "Alice" };'
                if ts
                else 'let str = "hello";\nlet num = 42;\nlet arr = [1, 2, 3];\nlet obj = { name: "Alice" };'
            ),
        },
        {
            "title": "Operators",
            "description": "Arithmetic, comparison and logical operators. Prefer === over ==.",
            "syntax": "+, -, *, /, ===, &&, ||",
            "usage": "Calculations and comparisons",
            "code": "let sum = 10 + 5;\nlet isEqual = (5 === 5);\nlet isTrue = true && false;",
        },
        {
            "title": "If Statements",
            "description": "Conditional logic with if/else.",
            "syntax": "if (condition) { ... } else { ... }",
            "usage": "Make decisions",
            "code": 'let age = 20;\nif (age >= 18) {\n  console.log("Adult");\n} else {\n  console.log("Minor");\n}',
        },
        {
            "title": "Loops",
            "description": "Repeat code with for, for...of and while loops.",
            "syntax": "for, for...of, while",
            "usage": "Iterate over data",
            "code": 'for (let i = 0; i < 5; i++) {\n  console.log(i);\n}\n\nfor (const fruit of ["apple", "pear"]) {\n  console.log(fruit);\n}',
        },
        {
            "title": "Functions",
            "description": "Reusable blocks of code.",
            "syntax": "function name(params) { ... }",
            "usage": "Organize and reuse code",
            "code": (
                "function add(a: number, b: number): number {\n  return a + b;\n}\nconst result = add(5, 3);"
                if ts
                else "function add(a, b) {\n  return a + b;\n}\nconst result = add(5, 3);"
            ),
        },
        {
            "title": "Arrow Functions",
            "description": "Concise function syntax that also keeps the surrounding this.",
            "syntax": "(params) => expression",
            "usage": "Callbacks and short helpers",
            "code": "const add = (a, b) => a + b;\nconst greet = name => `Hello, ${name}`;",
        },
        {
            "title": "Arrays",
            "description": "Ordered collections with powerful built-in methods.",
            "syntax": "[1, 2, 3], map, filter, reduce",
            "usage": "Store and transform lists of data",
            "code": 'let fruits = ["apple", "banana"];\nfruits.push("orange");\nconst upper = fruits.map(f => f.toUpperCase());\nconst total = [1, 2, 3].reduce((sum, n) => sum + n, 0);',
        },
        {
            "title": "Objects",
            "description": "Key-value pairs that group related data and behaviour.",
            "syntax": "{ key: value }",
            "usage": "Store structured data",
            "code": 'let person = {\n  name: "Alice",\n  age: 25,\n  greet() {\n    console.log(`Hi, I\'m ${this.name}`);\n  }\n};\nconst { name, age } = person;',
        },
        {
            "title": "Classes",
            "description": "Object-oriented programming with classes.",
            "syntax": "class Name { ... }",
            "usage": "Create reusable object templates",
            "code": (
                'class Person {\n  constructor(private name: string) {}\n  greet(): string {\n    return `Hello, ${this.name}`;\n  }\n}\nconst alice = new Person("Alice");'
                if ts
                else 'class Person {\n  constructor(name) {\n    this.name = name;\n  }\n  greet() {\n    return `Hello, ${this.name}`;\n  }\n}\nconst alice = new Person("Alice");'
            ),
        },
        {
            "title": "DOM Manipulation",
            "description": "Select and modify HTML elements from script.",
            "syntax": "document.querySelector()",
            "usage": "Make pages interactive",
            "code": 'const btn = document.querySelector("#myBtn");\nbtn.textContent = "Click me!";\nbtn.classList.add("primary");',
        },
        {
            "title": "Events",
            "description": "Respond to user actions with event listeners.",
            "syntax": 'addEventListener("event", handler)',
            "usage": "Interactive user interfaces",
            "code": 'button.addEventListener("click", () => {\n  console.log("Clicked!");\n});\ninput.addEventListener("change", (e) => {\n  console.log(e.target.value);\n});',
        },
        {
            "title": "Async/Await",
            "description": "Write asynchronous code that reads like synchronous code.",
            "syntax": "async/await, Promise",
            "usage": "API calls, async operations",
            "code": 'async function fetchData() {\n  const response = await fetch("/api/data");\n  return response.json();\n}\nfetchData().then(data => console.log(data));',
        },
        {
            "title": "Modules",
            "description": "Import and export code between files.",
            "syntax": "import/export",
            "usage": "Organize code into modules",
            "code": '// math.js\nexport function add(a, b) { return a + b; }\n\n// main.js\nimport { add } from "./math.js";\nconsole.log(add(5, 3));',
        },
        {
            "title": "Error Handling",
            "description": "Handle errors gracefully with try/catch/finally.",
            "syntax": "try/catch/finally",
            "usage": "Prevent crashes",
            "code": 'try {\n  const data = JSON.parse(invalidJSON);\n} catch (error) {\n  console.error("Parse error:", error);\n} finally {\n  console.log("Done");\n}',
        },
        {
            "title": "Project: Todo App",
            "description": "Build a complete todo list application in {name}.",
            "syntax": "N/A",
            "usage": "Apply all skills",
            "code": 'const todos = [];\nfunction addTodo(text) {\n  todos.push({ id: Date.now(), text, done: false });\n  render();\n}\nfunction toggleTodo(id) {\n  const todo = todos.find(t => t.id === id);\n  todo.done = !todo.done;\n  render();\n}\nfunction render() {\n  const list = document.querySelector("#todo-list");\n  list.innerHTML = todos\n    .map(t => `<li class="${t.done ? "done" : ""}">${t.text}</li>`)\n    .join("");\n}',
        },
    )
    return lessons(name, records)


def python_specs(name: str) -> list[SectionSpec]:
    """Lessons for Python used as a scripting language."""
    return general_purpose_lessons(name, "python")
