"""
Lesson content for databases (SQL, PostgreSQL, MongoDB, Redis, Firebase).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

DATABASE_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a database system for storing and querying data reliably.", "syntax": "Database queries", "usage": "Store and retrieve data", "code": "-- Query example\nSELECT * FROM users WHERE age > 18;"},
    {"title": "Tables and Schemas", "description": "Data lives in tables with typed columns and a primary key.", "syntax": "CREATE TABLE name (column TYPE, ...)", "usage": "Define structure", "code": "CREATE TABLE users (\n  id SERIAL PRIMARY KEY,\n  name TEXT NOT NULL,\n  email TEXT UNIQUE,\n  created_at TIMESTAMP DEFAULT now()\n);"},
    {"title": "CRUD Operations", "description": "Create, read, update and delete rows.", "syntax": "INSERT, SELECT, UPDATE, DELETE", "usage": "Everyday data changes", "code": "INSERT INTO users (name, email) VALUES ('Alice', 'alice@example.com');\nSELECT name, email FROM users;\nUPDATE users SET name = 'Alicia' WHERE id = 1;\nDELETE FROM users WHERE id = 1;"},
    {"title": "Filtering and Sorting", "description": "Narrow results with WHERE and order them with ORDER BY.", "syntax": "WHERE, ORDER BY, LIMIT", "usage": "Find exactly what you need", "code": "SELECT * FROM products\nWHERE price < 50 AND category = 'books'\nORDER BY price DESC\nLIMIT 10;"},
    {"title": "Joins", "description": "Combine rows from related tables.", "syntax": "JOIN table ON condition", "usage": "Query related data", "code": "SELECT o.id, u.name, o.total\nFROM orders o\nJOIN users u ON u.id = o.user_id;"},
    {"title": "Aggregation", "description": "Summarize data with aggregate functions and GROUP BY.", "syntax": "COUNT, SUM, AVG, GROUP BY, HAVING", "usage": "Reports and analytics", "code": "SELECT category, COUNT(*) AS items, AVG(price) AS avg_price\nFROM products\nGROUP BY category\nHAVING COUNT(*) > 5;"},
    {"title": "Indexes", "description": "Indexes speed up lookups at the cost of slower writes.", "syntax": "CREATE INDEX name ON table (column)", "usage": "Fast queries", "code": "CREATE INDEX idx_users_email ON users (email);\nEXPLAIN SELECT * FROM users WHERE email = 'alice@example.com';"},
    {"title": "Transactions", "description": "Group statements so they succeed or fail together.", "syntax": "BEGIN; ... COMMIT; / ROLLBACK;", "usage": "Data integrity", "code": "BEGIN;\nUPDATE accounts SET balance = balance - 100 WHERE id = 1;\nUPDATE accounts SET balance = balance + 100 WHERE id = 2;\nCOMMIT;"},
    {"title": "Document and Key-Value Stores", "description": "Not every workload is relational: documents and key-value pairs trade joins for flexibility and speed.", "syntax": "db.collection.find({...}), SET key value", "usage": "Flexible schemas, caching", "code": "// MongoDB\ndb.users.insertOne({ name: 'Alice', tags: ['admin'] });\ndb.users.find({ tags: 'admin' });\n\n# Redis\nSET session:42 \"alice\" EX 3600\nGET session:42"},
    {"title": "Project: Library Database", "description": "Design and query a library database in {name}: books, members and loans.", "syntax": "N/A", "usage": "Apply all concepts", "code": "CREATE TABLE books (id SERIAL PRIMARY KEY, title TEXT, author TEXT);\nCREATE TABLE members (id SERIAL PRIMARY KEY, name TEXT);\nCREATE TABLE loans (\n  book_id INT REFERENCES books(id),\n  member_id INT REFERENCES members(id),\n  due DATE\n);\n\nSELECT m.name, b.title, l.due\nFROM loans l\nJOIN books b ON b.id = l.book_id\nJOIN members m ON m.id = l.member_id\nWHERE l.due < CURRENT_DATE;"},
)


def database_specs(name: str) -> list[SectionSpec]:
    return lessons(name, DATABASE_LESSONS)
