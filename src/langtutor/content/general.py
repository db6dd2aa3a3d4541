"""
General-purpose language lessons.

The same sixteen-lesson progression (setup, variables, control flow,
functions, collections, classes, files, errors, modules, project) is filled
in from a per-language syntax table. Languages without a table get the
generic C-style snippets.
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

DEFAULT_LANGUAGE_DESCRIPTION = "powerful programming language"

LANGUAGE_DESCRIPTIONS = {
    "python": "versatile, beginner-friendly language used for web dev, data science, AI, and automation",
    "java": "powerful, object-oriented language used for enterprise applications, Android development, and backend systems",
    "javascript": "dynamic language that powers the web, running in browsers and on servers",
    "typescript": "typed superset of JavaScript for building large-scale applications",
    "go": "simple, efficient language designed by Google for building fast, reliable software",
    "rust": "systems programming language focused on safety, speed, and concurrency",
    "csharp": "modern, object-oriented language from Microsoft for building Windows apps, games, and web services",
    "cpp": "high-performance language for systems, games, and applications that need fine control over memory",
    "swift": "powerful language for iOS and Mac app development",
    "kotlin": "modern language for Android development and server-side applications",
}

PYTHON_SYNTAX = {
    "variable": "name = value",
    "hello_world": '# Python\nprint("Hello, World!")',
    "variable_example": 'name = "Alice"\nage = 25\nis_student = True',
    "data_types": 'text = "hello"  # str\nnumber = 42  # int\npi = 3.14  # float\nactive = True  # bool',
    "operators": "total = 10 + 5\nis_equal = (5 == 5)\nis_true = True and False",
    "if_statement": "if condition:\n    # code\nelse:\n    # code",
    "if_example": 'age = 20\nif age >= 18:\n    print("Adult")\nelse:\n    print("Minor")',
    "for_loop": "for i in range(10):",
    "loop_example": 'for i in range(5):\n    print(i)\n\nfor item in ["a", "b", "c"]:\n    print(item)',
    "function": "def name(params):",
    "function_example": 'def greet(name):\n    return f"Hello, {name}"\n\nresult = greet("Alice")',
    "array": "[1, 2, 3]",
    "array_example": 'fruits = ["apple", "banana"]\nfruits.append("orange")\nprint(fruits[0])',
    "map": "{key: value}",
    "map_example": 'person = {\n    "name": "Alice",\n    "age": 25\n}\nprint(person["name"])',
    "class": "class Name:",
    "class_example": 'class Person:\n    def __init__(self, name):\n        self.name = name\n\n    def greet(self):\n        return f"Hi, I\'m {self.name}"\n\nalice = Person("Alice")',
    "inheritance": "class Child(Parent):",
    "inheritance_example": "class Student(Person):\n    def __init__(self, name, grade):\n        super().__init__(name)\n        self.grade = grade",
    "file_read": 'with open("file.txt", "r") as f:',
    "file_read_example": 'with open("data.txt", "r") as file:\n    content = file.read()\n    print(content)',
    "file_write": 'with open("file.txt", "w") as f:',
    "file_write_example": 'with open("output.txt", "w") as file:\n    file.write("Hello, File!")',
    "error_handling": "try/except/finally",
    "error_example": 'try:\n    result = 10 / 0\nexcept ZeroDivisionError:\n    print("Cannot divide by zero")\nfinally:\n    print("Done")',
    "import": "import module or from module import function",
    "import_example": "import math\nprint(math.pi)\n\nfrom datetime import datetime\nprint(datetime.now())",
    "calculator_example": 'def add(a, b):\n    return a + b\n\ndef subtract(a, b):\n    return a - b\n\ndef multiply(a, b):\n    return a * b\n\ndef divide(a, b):\n    if b == 0:\n        raise ValueError("Cannot divide by zero")\n    return a / b\n\nOPERATIONS = {"+": add, "-": subtract, "*": multiply, "/": divide}\n\nwhile True:\n    expr = input("> ").split()\n    if not expr:\n        break\n    a, op, b = expr\n    print(OPERATIONS[op](float(a), float(b)))',
}

CSHARP_SYNTAX = {
    "variable": "type name = value;",
    "hello_world": '// C#\nusing System;\n\nclass Program\n{\n    static void Main()\n    {\n        Console.WriteLine("Hello, World!");\n    }\n}',
    "variable_example": 'string name = "Alice";\nint age = 25;\nvar isStudent = true;',
    "data_types": 'string text = "hello";\nint number = 42;\ndouble pi = 3.14;\nbool active = true;',
    "operators": "int sum = 10 + 5;\nbool isEqual = (5 == 5);\nbool isTrue = true && false;",
    "if_statement": "if (condition) { } else { }",
    "if_example": 'int age = 20;\nif (age >= 18)\n{\n    Console.WriteLine("Adult");\n}\nelse\n{\n    Console.WriteLine("Minor");\n}',
    "for_loop": "for (int i = 0; i < 10; i++) { }",
    "loop_example": 'for (int i = 0; i < 5; i++)\n{\n    Console.WriteLine(i);\n}\n\nforeach (var item in new[] { "a", "b", "c" })\n{\n    Console.WriteLine(item);\n}',
    "function": "returnType Name(params) { }",
    "function_example": 'static string Greet(string name)\n{\n    return $"Hello, {name}";\n}',
    "array": "new List<int> { 1, 2, 3 }",
    "array_example": 'var fruits = new List<string> { "apple", "banana" };\nfruits.Add("orange");\nConsole.WriteLine(fruits[0]);',
    "map": "new Dictionary<TKey, TValue>()",
    "map_example": 'var person = new Dictionary<string, string>\n{\n    ["name"] = "Alice",\n    ["city"] = "Paris"\n};\nConsole.WriteLine(person["name"]);',
    "class": "class Name { }",
    "class_example": 'class Person\n{\n    public string Name { get; }\n\n    public Person(string name) => Name = name;\n\n    public string Greet() => $"Hi, I\'m {Name}";\n}',
    "inheritance": "class Child : Parent { }",
    "inheritance_example": "class Student : Person\n{\n    public int Grade { get; }\n\n    public Student(string name, int grade) : base(name)\n    {\n        Grade = grade;\n    }\n}",
    "file_read": 'File.ReadAllText("file.txt")',
    "file_read_example": 'string content = File.ReadAllText("data.txt");\nConsole.WriteLine(content);',
    "file_write": 'File.WriteAllText("file.txt", text)',
    "file_write_example": 'File.WriteAllText("output.txt", "Hello, File!");',
    "error_handling": "try/catch/finally",
    "error_example": 'try\n{\n    int result = 10 / int.Parse("0");\n}\ncatch (DivideByZeroException)\n{\n    Console.WriteLine("Cannot divide by zero");\n}\nfinally\n{\n    Console.WriteLine("Done");\n}',
    "import": "using Namespace;",
    "import_example": "using System;\nusing System.Collections.Generic;\nusing System.IO;",
    "calculator_example": 'static double Calculate(double a, string op, double b) => op switch\n{\n    "+" => a + b,\n    "-" => a - b,\n    "*" => a * b,\n    "/" when b != 0 => a / b,\n    _ => throw new ArgumentException($"Unsupported operation: {op}")\n};\n\nConsole.WriteLine(Calculate(5, "+", 3));',
}

CPP_SYNTAX = {
    "variable": "type name = value;",
    "hello_world": '// C++\n#include <iostream>\n\nint main() {\n    std::cout << "Hello, World!" << std::endl;\n    return 0;\n}',
    "variable_example": 'std::string name = "Alice";\nint age = 25;\nauto isStudent = true;',
    "data_types": 'std::string text = "hello";\nint number = 42;\ndouble pi = 3.14;\nbool active = true;',
    "operators": "int sum = 10 + 5;\nbool isEqual = (5 == 5);\nbool isTrue = true && false;",
    "if_statement": "if (condition) { } else { }",
    "if_example": 'int age = 20;\nif (age >= 18) {\n    std::cout << "Adult\\n";\n} else {\n    std::cout << "Minor\\n";\n}',
    "for_loop": "for (int i = 0; i < 10; ++i) { }",
    "loop_example": 'for (int i = 0; i < 5; ++i) {\n    std::cout << i << "\\n";\n}\n\nfor (const auto& item : items) {\n    std::cout << item << "\\n";\n}',
    "function": "returnType name(params) { }",
    "function_example": 'std::string greet(const std::string& name) {\n    return "Hello, " + name;\n}',
    "array": "std::vector<int> v{1, 2, 3};",
    "array_example": 'std::vector<std::string> fruits{"apple", "banana"};\nfruits.push_back("orange");\nstd::cout << fruits[0];',
    "map": "std::map<Key, Value>",
    "map_example": 'std::map<std::string, int> ages{{"Alice", 25}};\nages["Bob"] = 30;\nstd::cout << ages["Alice"];',
    "class": "class Name { public: ... };",
    "class_example": 'class Person {\npublic:\n    explicit Person(std::string name) : name_(std::move(name)) {}\n    std::string greet() const { return "Hi, I\'m " + name_; }\nprivate:\n    std::string name_;\n};',
    "inheritance": "class Child : public Parent { };",
    "inheritance_example": "class Student : public Person {\npublic:\n    Student(std::string name, int grade) : Person(std::move(name)), grade_(grade) {}\nprivate:\n    int grade_;\n};",
    "file_read": 'std::ifstream in("file.txt");',
    "file_read_example": 'std::ifstream in("data.txt");\nstd::string line;\nwhile (std::getline(in, line)) {\n    std::cout << line << "\\n";\n}',
    "file_write": 'std::ofstream out("file.txt");',
    "file_write_example": 'std::ofstream out("output.txt");\nout << "Hello, File!";',
    "error_handling": "try/catch",
    "error_example": 'try {\n    throw std::runtime_error("Something failed");\n} catch (const std::exception& e) {\n    std::cerr << e.what() << "\\n";\n}',
    "import": "#include <header>",
    "import_example": "#include <iostream>\n#include <string>\n#include <vector>",
    "calculator_example": 'double calculate(double a, char op, double b) {\n    switch (op) {\n        case \'+\': return a + b;\n        case \'-\': return a - b;\n        case \'*\': return a * b;\n        case \'/\': if (b != 0) return a / b;\n    }\n    throw std::invalid_argument("bad operation");\n}',
}

GENERIC_SYNTAX = {
    "variable": "let name = value",
    "hello_world": 'print("Hello, World!")',
    "variable_example": 'let name = "Alice";\nlet age = 25;',
    "data_types": "string, number, boolean, array, object",
    "operators": "Arithmetic: +, -, *, /\nComparison: ==, !=, <, >\nLogical: &&, ||, !",
    "if_statement": "if (condition) { } else { }",
    "if_example": 'if (age >= 18) {\n  print("Adult");\n}',
    "for_loop": "for (let i = 0; i < 10; i++) { }",
    "loop_example": "for (let i = 0; i < 5; i++) {\n  print(i);\n}",
    "function": "function name(params) { }",
    "function_example": 'function greet(name) {\n  return "Hello, " + name;\n}',
    "array": "[1, 2, 3]",
    "array_example": "let arr = [1, 2, 3];\narr.push(4);",
    "map": "{key: value}",
    "map_example": 'let obj = {name: "Alice", age: 25};',
    "class": "class Name { }",
    "class_example": "class Person {\n  constructor(name) {\n    this.name = name;\n  }\n}",
    "inheritance": "class Child extends Parent",
    "inheritance_example": "class Student extends Person { }",
    "file_read": "read(path)",
    "file_read_example": 'let content = read("data.txt");\nprint(content);',
    "file_write": "write(path, text)",
    "file_write_example": 'write("output.txt", "Hello, File!");',
    "error_handling": "try/catch",
    "error_example": "try {\n  // code\n} catch (error) {\n  print(error);\n}",
    "import": "import/export",
    "import_example": 'import { module } from "package";',
    "calculator_example": 'function calculate(a, op, b) {\n  if (op == "+") return a + b;\n  if (op == "-") return a - b;\n  if (op == "*") return a * b;\n  if (op == "/") return b != 0 ? a / b : "Error";\n}\n\nprint(calculate(5, "+", 3));',
}

SYNTAX_TABLES = {
    "python": PYTHON_SYNTAX,
    "csharp": CSHARP_SYNTAX,
    "cpp": CPP_SYNTAX,
}


def describe_language(language_id: str) -> str:
    """Return the one-line blurb for a language, or a neutral default."""
    return LANGUAGE_DESCRIPTIONS.get((language_id or "").strip().lower(), DEFAULT_LANGUAGE_DESCRIPTION)


def syntax_for(language_id: str) -> dict[str, str]:
    """Return the syntax table for a language, falling back to generic snippets."""
    return SYNTAX_TABLES.get((language_id or "").strip().lower(), GENERIC_SYNTAX)


def general_purpose_lessons(name: str, language_id: str = "") -> list[SectionSpec]:
    """
    Build the general-purpose lesson progression for one language.

    Args:
        name: Display name used in titles and prose
        language_id: Key into SYNTAX_TABLES and LANGUAGE_DESCRIPTIONS

    Returns:
        Sixteen SectionSpec objects from introduction to project
    """
    s = syntax_for(language_id)
    records = (
        {"title": "Introduction to {name}", "description": f"{{name}} is a {describe_language(language_id)}.", "syntax": s["variable"], "usage": "Build applications, scripts, and systems", "code": s["hello_world"]},
        {"title": "Variables", "description": "Variables store and name data so it can be used later.", "syntax": s["variable"], "usage": "Store data for later use", "code": s["variable_example"]},
        {"title": "Data Types", "description": "{name} has various data types for different purposes.", "syntax": "string, number, boolean, etc.", "usage": "Different types for different data", "code": s["data_types"]},
        {"title": "Operators", "description": "Perform arithmetic, comparison, and logical operations.", "syntax": "+, -, *, /, ==, &&, ||", "usage": "Calculate and compare values", "code": s["operators"]},
        {"title": "If/Else Statements", "description": "Make decisions in code.", "syntax": s["if_statement"], "usage": "Conditional logic", "code": s["if_example"]},
        {"title": "Loops", "description": "Repeat code multiple times.", "syntax": s["for_loop"], "usage": "Iterate over collections", "code": s["loop_example"]},
        {"title": "Functions", "description": "Reusable blocks of code that take inputs and return results.", "syntax": s["function"], "usage": "Organize and reuse code", "code": s["function_example"]},
        {"title": "Lists/Arrays", "description": "Ordered collections of items.", "syntax": s["array"], "usage": "Store multiple values", "code": s["array_example"]},
        {"title": "Dictionaries/Maps", "description": "Key-value pairs for fast lookup.", "syntax": s["map"], "usage": "Associate keys with values", "code": s["map_example"]},
        {"title": "Classes", "description": "Object-oriented programming with classes.", "syntax": s["class"], "usage": "Create custom types", "code": s["class_example"]},
        {"title": "Inheritance", "description": "Extend classes to reuse code.", "syntax": s["inheritance"], "usage": "Code reuse through inheritance", "code": s["inheritance_example"]},
        {"title": "File Reading", "description": "Read data from files.", "syntax": s["file_read"], "usage": "Load data from disk", "code": s["file_read_example"]},
        {"title": "File Writing", "description": "Write data to files.", "syntax": s["file_write"], "usage": "Save data to disk", "code": s["file_write_example"]},
        {"title": "Error Handling", "description": "Handle errors gracefully instead of crashing.", "syntax": s["error_handling"], "usage": "Prevent crashes", "code": s["error_example"]},
        {"title": "Modules/Packages", "description": "Organize code into reusable modules.", "syntax": s["import"], "usage": "Code organization", "code": s["import_example"]},
        {"title": "Project: Calculator", "description": "Build a functional calculator in {name} using everything covered so far.", "syntax": "N/A", "usage": "Apply all concepts", "code": s["calculator_example"]},
    )
    return lessons(name, records)


def general_specs(name: str) -> list[SectionSpec]:
    """Lessons for languages without a dedicated table."""
    return general_purpose_lessons(name)


def csharp_specs(name: str) -> list[SectionSpec]:
    return general_purpose_lessons(name, "csharp")


def cpp_specs(name: str) -> list[SectionSpec]:
    return general_purpose_lessons(name, "cpp")
