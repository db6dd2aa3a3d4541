"""
Lesson content for front-end frameworks (React, Next.js, Vue, Angular).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

REACT_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a JavaScript library for building user interfaces out of small, reusable components.", "syntax": "function Component() { return <JSX />; }", "usage": "Build interactive UIs", "code": "import React from 'react';\n\nfunction App() {\n  return <h1>Hello, World!</h1>;\n}\n\nexport default App;"},
    {"title": "JSX", "description": "JSX lets you write HTML-like markup inside JavaScript. Expressions go inside curly braces.", "syntax": "<div>{expression}</div>", "usage": "Describe what the UI should look like", "code": "const name = 'Alice';\nconst element = (\n  <div className=\"greeting\">\n    <h1>Hello, {name}!</h1>\n    <p>2 + 2 = {2 + 2}</p>\n  </div>\n);"},
    {"title": "Components and Props", "description": "Components receive data from their parent through props.", "syntax": "function Child({ prop }) { ... }", "usage": "Reusable UI pieces", "code": "function Greeting({ name }) {\n  return <p>Hello, {name}</p>;\n}\n\nfunction App() {\n  return <Greeting name=\"Alice\" />;\n}"},
    {"title": "State with useState", "description": "State holds data that changes over time and triggers a re-render when updated.", "syntax": "const [value, setValue] = useState(initial);", "usage": "Interactive components", "code": "import { useState } from 'react';\n\nfunction Counter() {\n  const [count, setCount] = useState(0);\n  return <button onClick={() => setCount(count + 1)}>Clicked {count} times</button>;\n}"},
    {"title": "Handling Events", "description": "Attach handlers with camelCase props such as onClick and onChange.", "syntax": "onClick={handler}", "usage": "Respond to user input", "code": "function Form() {\n  const [text, setText] = useState('');\n  return <input value={text} onChange={e => setText(e.target.value)} />;\n}"},
    {"title": "Lists and Keys", "description": "Render arrays with map and give every item a stable key.", "syntax": "items.map(item => <li key={item.id}>...</li>)", "usage": "Dynamic lists", "code": "function TodoList({ todos }) {\n  return (\n    <ul>\n      {todos.map(todo => <li key={todo.id}>{todo.text}</li>)}\n    </ul>\n  );\n}"},
    {"title": "Effects with useEffect", "description": "Effects synchronize a component with something outside React, such as a network request.", "syntax": "useEffect(() => { ... }, [deps]);", "usage": "Data fetching, subscriptions", "code": "function Users() {\n  const [users, setUsers] = useState([]);\n  useEffect(() => {\n    fetch('/api/users').then(r => r.json()).then(setUsers);\n  }, []);\n  return <ul>{users.map(u => <li key={u.id}>{u.name}</li>)}</ul>;\n}"},
    {"title": "Context", "description": "Context passes data deep into the tree without threading props through every level.", "syntax": "createContext, useContext", "usage": "Themes, auth, settings", "code": "const ThemeContext = createContext('light');\n\nfunction Button() {\n  const theme = useContext(ThemeContext);\n  return <button className={theme}>OK</button>;\n}"},
    {"title": "Custom Hooks", "description": "Extract reusable stateful logic into functions whose names start with use.", "syntax": "function useSomething() { ... }", "usage": "Share logic between components", "code": "function useToggle(initial = false) {\n  const [on, setOn] = useState(initial);\n  const toggle = () => setOn(v => !v);\n  return [on, toggle];\n}"},
    {"title": "Project: Todo App", "description": "Build a todo app in {name} with adding, toggling and filtering.", "syntax": "N/A", "usage": "Apply all concepts", "code": "function TodoApp() {\n  const [todos, setTodos] = useState([]);\n  const [text, setText] = useState('');\n  const add = () => {\n    setTodos([...todos, { id: Date.now(), text, done: false }]);\n    setText('');\n  };\n  return (\n    <div>\n      <input value={text} onChange={e => setText(e.target.value)} />\n      <button onClick={add}>Add</button>\n      <ul>{todos.map(t => <li key={t.id}>{t.text}</li>)}</ul>\n    </div>\n  );\n}"},
)

NEXT_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a React framework that adds file-based routing, server rendering and API routes.", "syntax": "npx create-next-app@latest", "usage": "Production-ready React applications", "code": "// app/page.tsx\nexport default function Home() {\n  return <h1>Hello, Next.js!</h1>;\n}"},
    {"title": "File-based Routing", "description": "Every folder under app/ with a page file becomes a route.", "syntax": "app/<segment>/page.tsx", "usage": "Define pages without a router config", "code": "// app/about/page.tsx -> /about\nexport default function About() {\n  return <h1>About us</h1>;\n}"},
    {"title": "Layouts", "description": "Layouts wrap pages and keep shared UI mounted between navigations.", "syntax": "app/layout.tsx", "usage": "Shared navigation and shells", "code": "export default function RootLayout({ children }) {\n  return (\n    <html lang=\"en\">\n      <body>\n        <nav>My Site</nav>\n        {children}\n      </body>\n    </html>\n  );\n}"},
    {"title": "Dynamic Routes", "description": "Square-bracket folders capture URL segments as params.", "syntax": "app/blog/[slug]/page.tsx", "usage": "Detail pages", "code": "export default function Post({ params }) {\n  return <h1>Post: {params.slug}</h1>;\n}"},
    {"title": "Server Components and Data Fetching", "description": "Components render on the server by default and can await data directly.", "syntax": "async function Page() { const data = await fetch(...) }", "usage": "Fast, SEO-friendly pages", "code": "export default async function Page() {\n  const res = await fetch('https://api.example.com/posts', { next: { revalidate: 60 } });\n  const posts = await res.json();\n  return <ul>{posts.map(p => <li key={p.id}>{p.title}</li>)}</ul>;\n}"},
    {"title": "Client Components", "description": "Add the 'use client' directive for components that need state or browser APIs.", "syntax": "'use client'", "usage": "Interactivity", "code": "'use client';\nimport { useState } from 'react';\n\nexport default function Counter() {\n  const [n, setN] = useState(0);\n  return <button onClick={() => setN(n + 1)}>{n}</button>;\n}"},
    {"title": "Route Handlers", "description": "route.ts files expose HTTP endpoints next to your pages.", "syntax": "export async function GET(request) { ... }", "usage": "Backend endpoints in the same project", "code": "// app/api/hello/route.ts\nexport async function GET() {\n  return Response.json({ message: 'Hello' });\n}"},
    {"title": "Navigation and Links", "description": "The Link component prefetches routes for instant client-side navigation.", "syntax": "<Link href=\"/path\">", "usage": "Move between pages", "code": "import Link from 'next/link';\n\nexport default function Nav() {\n  return <Link href=\"/about\">About</Link>;\n}"},
    {"title": "Project: Blog", "description": "Build a small blog in {name} with a post list, dynamic post pages and an API route.", "syntax": "N/A", "usage": "Apply all concepts", "code": "// app/blog/page.tsx\nimport Link from 'next/link';\nimport { getPosts } from '@/lib/posts';\n\nexport default async function Blog() {\n  const posts = await getPosts();\n  return (\n    <ul>\n      {posts.map(p => (\n        <li key={p.slug}><Link href={`/blog/${p.slug}`}>{p.title}</Link></li>\n      ))}\n    </ul>\n  );\n}"},
)

VUE_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a progressive framework for building user interfaces with reactive, component-based templates.", "syntax": "createApp(App).mount('#app')", "usage": "Build interactive UIs", "code": "<script setup>\nimport { ref } from 'vue'\nconst message = ref('Hello, Vue!')\n</script>\n\n<template>\n  <h1>{{ message }}</h1>\n</template>"},
    {"title": "Template Syntax", "description": "Double curly braces interpolate data and directives bind attributes.", "syntax": "{{ value }}, v-bind, :attr", "usage": "Display reactive data", "code": "<template>\n  <p>{{ user.name }}</p>\n  <img :src=\"user.avatar\" :alt=\"user.name\" />\n</template>"},
    {"title": "Reactivity", "description": "ref and reactive create state that updates the DOM when it changes.", "syntax": "ref(), reactive(), computed()", "usage": "Reactive state", "code": "<script setup>\nimport { ref, computed } from 'vue'\nconst count = ref(0)\nconst double = computed(() => count.value * 2)\n</script>"},
    {"title": "Directives", "description": "v-if, v-for and v-on control rendering and events.", "syntax": "v-if, v-for, v-on (@)", "usage": "Conditional and list rendering", "code": "<template>\n  <button @click=\"count++\">Add</button>\n  <p v-if=\"count > 5\">That's a lot!</p>\n  <li v-for=\"item in items\" :key=\"item.id\">{{ item.name }}</li>\n</template>"},
    {"title": "Components and Props", "description": "Split the UI into single-file components that receive props.", "syntax": "defineProps()", "usage": "Reusable UI pieces", "code": "<script setup>\nconst props = defineProps({ title: String })\n</script>\n\n<template>\n  <h2>{{ props.title }}</h2>\n</template>"},
    {"title": "Events and Emits", "description": "Children notify parents by emitting events.", "syntax": "defineEmits(['event'])", "usage": "Child-to-parent communication", "code": "<script setup>\nconst emit = defineEmits(['select'])\n</script>\n\n<template>\n  <button @click=\"emit('select', 42)\">Pick</button>\n</template>"},
    {"title": "Forms and v-model", "description": "v-model creates two-way bindings on form inputs.", "syntax": "v-model=\"value\"", "usage": "User input", "code": "<script setup>\nimport { ref } from 'vue'\nconst name = ref('')\n</script>\n\n<template>\n  <input v-model=\"name\" />\n  <p>Hello, {{ name }}</p>\n</template>"},
    {"title": "Lifecycle Hooks", "description": "Run code when a component mounts, updates or unmounts.", "syntax": "onMounted(), onUnmounted()", "usage": "Fetching data, cleanup", "code": "<script setup>\nimport { ref, onMounted } from 'vue'\nconst users = ref([])\nonMounted(async () => {\n  users.value = await (await fetch('/api/users')).json()\n})\n</script>"},
    {"title": "Project: Shopping List", "description": "Build a shopping list in {name} with adding, removing and a computed total.", "syntax": "N/A", "usage": "Apply all concepts", "code": "<script setup>\nimport { ref, computed } from 'vue'\nconst items = ref([])\nconst draft = ref('')\nconst add = () => { items.value.push({ id: Date.now(), name: draft.value }); draft.value = '' }\nconst total = computed(() => items.value.length)\n</script>\n\n<template>\n  <input v-model=\"draft\" @keyup.enter=\"add\" />\n  <ul><li v-for=\"i in items\" :key=\"i.id\">{{ i.name }}</li></ul>\n  <p>{{ total }} items</p>\n</template>"},
)

ANGULAR_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a TypeScript framework for building large single-page applications with components, dependency injection and a powerful CLI.", "syntax": "ng new my-app", "usage": "Enterprise web applications", "code": "import { Component } from '@angular/core';\n\n@Component({\n  selector: 'app-root',\n  standalone: true,\n  template: '<h1>Hello, Angular!</h1>',\n})\nexport class AppComponent {}"},
    {"title": "Components", "description": "A component pairs a TypeScript class with a template and styles.", "syntax": "@Component({ selector, template })", "usage": "Building blocks of the UI", "code": "@Component({\n  selector: 'app-greeting',\n  standalone: true,\n  template: '<p>Hello, {{ name }}</p>',\n})\nexport class GreetingComponent {\n  name = 'Alice';\n}"},
    {"title": "Data Binding", "description": "Interpolation, property binding, event binding and two-way binding connect class and template.", "syntax": "{{ }}, [prop], (event), [(ngModel)]", "usage": "Keep the view in sync", "code": "<input [value]=\"title\" (input)=\"title = $any($event.target).value\" />\n<button (click)=\"save()\">Save</button>\n<p>{{ title }}</p>"},
    {"title": "Control Flow", "description": "Built-in @if and @for blocks render conditionally and over lists.", "syntax": "@if (cond) { } @for (item of items; track item.id) { }", "usage": "Dynamic templates", "code": "@if (items.length) {\n  <ul>\n    @for (item of items; track item.id) {\n      <li>{{ item.name }}</li>\n    }\n  </ul>\n} @else {\n  <p>No items</p>\n}"},
    {"title": "Inputs and Outputs", "description": "Components receive data through inputs and emit events through outputs.", "syntax": "input(), output()", "usage": "Parent-child communication", "code": "export class ItemComponent {\n  item = input.required<Item>();\n  remove = output<number>();\n}"},
    {"title": "Services and Dependency Injection", "description": "Services hold shared logic and are injected where needed.", "syntax": "@Injectable({ providedIn: 'root' })", "usage": "Shared state and data access", "code": "@Injectable({ providedIn: 'root' })\nexport class TodoService {\n  private todos: string[] = [];\n  add(todo: string) { this.todos.push(todo); }\n  all() { return this.todos; }\n}"},
    {"title": "HTTP Client", "description": "HttpClient performs requests and returns observables.", "syntax": "this.http.get<T>(url)", "usage": "Talk to APIs", "code": "export class UserService {\n  private http = inject(HttpClient);\n  users$ = this.http.get<User[]>('/api/users');\n}"},
    {"title": "Routing", "description": "The router maps URLs to components.", "syntax": "provideRouter(routes)", "usage": "Multi-page applications", "code": "export const routes: Routes = [\n  { path: '', component: HomeComponent },\n  { path: 'users/:id', component: UserDetailComponent },\n];"},
    {"title": "Project: Task Manager", "description": "Build a task manager in {name} with a service, routing and forms.", "syntax": "N/A", "usage": "Apply all concepts", "code": "@Component({\n  selector: 'app-tasks',\n  standalone: true,\n  imports: [FormsModule],\n  template: `\n    <input [(ngModel)]=\"draft\" />\n    <button (click)=\"add()\">Add</button>\n    @for (t of tasks.all(); track t) { <li>{{ t }}</li> }\n  `,\n})\nexport class TasksComponent {\n  tasks = inject(TodoService);\n  draft = '';\n  add() { this.tasks.add(this.draft); this.draft = ''; }\n}"},
)

FRAMEWORK_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a popular framework for building modern web applications.", "syntax": "Component-based architecture", "usage": "Build interactive UIs", "code": "// A component renders part of the page\nfunction App() {\n  return '<h1>Hello, World!</h1>';\n}"},
    {"title": "Project Setup", "description": "Scaffold a new project with the framework's CLI and start the dev server.", "syntax": "npm create <framework>@latest", "usage": "Start new projects quickly", "code": "npm create vite@latest my-app\ncd my-app\nnpm install\nnpm run dev"},
    {"title": "Components", "description": "Break the interface into small, reusable components.", "syntax": "component(props) -> view", "usage": "Reusable UI", "code": "function Card({ title, body }) {\n  return `<article><h2>${title}</h2><p>${body}</p></article>`;\n}"},
    {"title": "State", "description": "State is data that changes over time and drives re-rendering.", "syntax": "state -> view", "usage": "Interactive features", "code": "let count = 0;\nfunction increment() {\n  count += 1;\n  render();\n}"},
    {"title": "Routing", "description": "Map URLs to views so users can navigate without full reloads.", "syntax": "path -> component", "usage": "Multi-page applications", "code": "const routes = {\n  '/': Home,\n  '/about': About,\n};"},
    {"title": "Fetching Data", "description": "Load data from APIs and show loading and error states.", "syntax": "fetch(url)", "usage": "Dynamic content", "code": "async function loadUsers() {\n  const res = await fetch('/api/users');\n  if (!res.ok) throw new Error('Failed to load');\n  return res.json();\n}"},
    {"title": "Project: Dashboard", "description": "Build a small dashboard with {name} that lists, filters and refreshes data.", "syntax": "N/A", "usage": "Apply all concepts", "code": "async function Dashboard() {\n  const users = await loadUsers();\n  return users.map(u => Card({ title: u.name, body: u.email })).join('');\n}"},
)


def react_specs(name: str) -> list[SectionSpec]:
    return lessons(name, REACT_LESSONS)


def next_specs(name: str) -> list[SectionSpec]:
    return lessons(name, NEXT_LESSONS)


def vue_specs(name: str) -> list[SectionSpec]:
    return lessons(name, VUE_LESSONS)


def angular_specs(name: str) -> list[SectionSpec]:
    return lessons(name, ANGULAR_LESSONS)


def framework_specs(name: str) -> list[SectionSpec]:
    """Framework lessons that are not tied to a specific library."""
    return lessons(name, FRAMEWORK_LESSONS)
