"""
Lesson content for mobile development (React Native, Flutter, Swift, Kotlin).
"""

from langtutor.content._helpers import lessons
from langtutor.core.models import SectionSpec

REACT_NATIVE_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} builds native iOS and Android apps from a single React codebase.", "syntax": "npx create-expo-app my-app", "usage": "Cross-platform mobile apps", "code": "import { Text, View } from 'react-native';\n\nexport default function App() {\n  return (\n    <View>\n      <Text>Hello, mobile!</Text>\n    </View>\n  );\n}"},
    {"title": "Core Components", "description": "View, Text, Image and ScrollView map to native widgets on each platform.", "syntax": "<View>, <Text>, <Image>, <ScrollView>", "usage": "Build screens", "code": "<ScrollView>\n  <Image source={{ uri: 'https://example.com/cat.png' }} style={{ width: 100, height: 100 }} />\n  <Text>A cat</Text>\n</ScrollView>"},
    {"title": "Styling", "description": "Styles are JavaScript objects created with StyleSheet and laid out with Flexbox.", "syntax": "StyleSheet.create({ ... })", "usage": "Consistent look and layout", "code": "const styles = StyleSheet.create({\n  container: { flex: 1, alignItems: 'center', justifyContent: 'center' },\n  title: { fontSize: 24, fontWeight: 'bold' },\n});"},
    {"title": "State and Input", "description": "Use hooks for state and TextInput for keyboard entry.", "syntax": "useState, <TextInput>", "usage": "Interactive screens", "code": "function NameInput() {\n  const [name, setName] = useState('');\n  return <TextInput value={name} onChangeText={setName} placeholder=\"Your name\" />;\n}"},
    {"title": "Lists", "description": "FlatList renders long lists efficiently by only mounting visible rows.", "syntax": "<FlatList data renderItem keyExtractor />", "usage": "Feeds and catalogs", "code": "<FlatList\n  data={items}\n  keyExtractor={item => item.id}\n  renderItem={({ item }) => <Text>{item.title}</Text>}\n/>"},
    {"title": "Navigation", "description": "React Navigation provides stacks, tabs and drawers.", "syntax": "createNativeStackNavigator()", "usage": "Multi-screen apps", "code": "const Stack = createNativeStackNavigator();\n\nexport default function App() {\n  return (\n    <NavigationContainer>\n      <Stack.Navigator>\n        <Stack.Screen name=\"Home\" component={HomeScreen} />\n        <Stack.Screen name=\"Details\" component={DetailsScreen} />\n      </Stack.Navigator>\n    </NavigationContainer>\n  );\n}"},
    {"title": "Device Storage", "description": "AsyncStorage persists small key-value data on the device.", "syntax": "AsyncStorage.setItem / getItem", "usage": "Remember settings", "code": "await AsyncStorage.setItem('theme', 'dark');\nconst theme = await AsyncStorage.getItem('theme');"},
    {"title": "Project: Notes App", "description": "Build a notes app in {name} with a list screen, an editor screen and local storage.", "syntax": "N/A", "usage": "Apply all concepts", "code": "function NotesScreen({ navigation }) {\n  const [notes, setNotes] = useState([]);\n  useEffect(() => {\n    AsyncStorage.getItem('notes').then(raw => setNotes(JSON.parse(raw ?? '[]')));\n  }, []);\n  return (\n    <FlatList\n      data={notes}\n      keyExtractor={n => n.id}\n      renderItem={({ item }) => (\n        <Text onPress={() => navigation.navigate('Edit', { id: item.id })}>{item.title}</Text>\n      )}\n    />\n  );\n}"},
)

FLUTTER_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is Google's UI toolkit for building natively compiled apps for mobile, web and desktop from one Dart codebase.", "syntax": "flutter create my_app", "usage": "Cross-platform apps", "code": "import 'package:flutter/material.dart';\n\nvoid main() => runApp(const MaterialApp(home: Text('Hello, Flutter!')));"},
    {"title": "Dart Basics", "description": "Dart is a typed, null-safe language with classes and async support.", "syntax": "var, final, String?, Future<T>", "usage": "The language behind Flutter", "code": "final name = 'Alice';\nint? age;\nString greet(String who) => 'Hello, $who';"},
    {"title": "Widgets", "description": "Everything on screen is a widget, composed into a tree.", "syntax": "class MyWidget extends StatelessWidget", "usage": "Build UI", "code": "class Greeting extends StatelessWidget {\n  const Greeting({super.key, required this.name});\n  final String name;\n\n  @override\n  Widget build(BuildContext context) => Text('Hello, $name');\n}"},
    {"title": "Layouts", "description": "Row, Column, Stack and Padding arrange widgets.", "syntax": "Row, Column, Expanded, Padding", "usage": "Position content", "code": "Column(\n  crossAxisAlignment: CrossAxisAlignment.start,\n  children: const [\n    Text('Title'),\n    SizedBox(height: 8),\n    Text('Subtitle'),\n  ],\n)"},
    {"title": "State", "description": "StatefulWidget keeps mutable state and rebuilds when setState is called.", "syntax": "setState(() { ... })", "usage": "Interactive widgets", "code": "class Counter extends StatefulWidget {\n  const Counter({super.key});\n  @override\n  State<Counter> createState() => _CounterState();\n}\n\nclass _CounterState extends State<Counter> {\n  int count = 0;\n  @override\n  Widget build(BuildContext context) =>\n      TextButton(onPressed: () => setState(() => count++), child: Text('$count'));\n}"},
    {"title": "Navigation", "description": "Navigator pushes and pops routes.", "syntax": "Navigator.push(context, MaterialPageRoute(...))", "usage": "Multi-screen apps", "code": "Navigator.push(\n  context,\n  MaterialPageRoute(builder: (_) => const DetailsScreen()),\n);"},
    {"title": "Networking", "description": "The http package fetches JSON, usually inside a FutureBuilder.", "syntax": "await http.get(Uri.parse(url))", "usage": "Load remote data", "code": "Future<List<dynamic>> fetchPosts() async {\n  final res = await http.get(Uri.parse('https://example.com/posts'));\n  return jsonDecode(res.body) as List<dynamic>;\n}"},
    {"title": "Project: Weather App", "description": "Build a weather app in {name} that fetches a forecast and shows it in a list.", "syntax": "N/A", "usage": "Apply all concepts", "code": "FutureBuilder<List<dynamic>>(\n  future: fetchForecast(),\n  builder: (context, snapshot) {\n    if (!snapshot.hasData) return const CircularProgressIndicator();\n    return ListView(\n      children: [for (final day in snapshot.data!) ListTile(title: Text('${day['temp']}°'))],\n    );\n  },\n)"},
)

SWIFT_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is Apple's modern, safe language for iOS, macOS, watchOS and tvOS apps.", "syntax": "let constant = value", "usage": "Apple platform apps", "code": "import SwiftUI\n\nstruct ContentView: View {\n    var body: some View {\n        Text(\"Hello, Swift!\")\n    }\n}"},
    {"title": "Variables and Optionals", "description": "let declares constants, var declares variables and optionals model missing values.", "syntax": "let, var, Type?", "usage": "Safe data handling", "code": "let name = \"Alice\"\nvar score = 0\nvar nickname: String? = nil\nif let nick = nickname {\n    print(nick)\n}"},
    {"title": "Functions and Closures", "description": "Functions have labelled parameters and closures capture surrounding values.", "syntax": "func name(label param: Type) -> Return", "usage": "Reusable logic", "code": "func greet(person name: String) -> String {\n    \"Hello, \\(name)\"\n}\nlet doubled = [1, 2, 3].map { $0 * 2 }"},
    {"title": "Structs and Classes", "description": "Structs are value types, classes are reference types.", "syntax": "struct Name { }, class Name { }", "usage": "Model data", "code": "struct Task: Identifiable {\n    let id = UUID()\n    var title: String\n    var done = false\n}"},
    {"title": "SwiftUI Views", "description": "SwiftUI describes UI declaratively with stacks and modifiers.", "syntax": "VStack, HStack, .padding()", "usage": "Build screens", "code": "VStack(alignment: .leading) {\n    Text(\"Title\").font(.headline)\n    Text(\"Subtitle\").foregroundStyle(.secondary)\n}\n.padding()"},
    {"title": "State", "description": "@State stores view-local data and refreshes the view on change.", "syntax": "@State private var value", "usage": "Interactive views", "code": "struct Counter: View {\n    @State private var count = 0\n    var body: some View {\n        Button(\"Tapped \\(count) times\") { count += 1 }\n    }\n}"},
    {"title": "Lists and Navigation", "description": "List renders rows and NavigationStack pushes detail views.", "syntax": "NavigationStack, List, NavigationLink", "usage": "Master-detail apps", "code": "NavigationStack {\n    List(tasks) { task in\n        NavigationLink(task.title, value: task.id)\n    }\n    .navigationTitle(\"Tasks\")\n}"},
    {"title": "Project: Task Tracker", "description": "Build a task tracker in {name} with a list, add sheet and completion toggles.", "syntax": "N/A", "usage": "Apply all concepts", "code": "struct TasksView: View {\n    @State private var tasks: [Task] = []\n    @State private var draft = \"\"\n    var body: some View {\n        VStack {\n            TextField(\"New task\", text: $draft)\n                .onSubmit { tasks.append(Task(title: draft)); draft = \"\" }\n            List($tasks) { $task in\n                Toggle(task.title, isOn: $task.done)\n            }\n        }\n    }\n}"},
)

KOTLIN_LESSONS = (
    {"title": "Introduction to {name}", "description": "{name} is a concise, null-safe language and the preferred choice for Android development.", "syntax": "val name = value", "usage": "Android apps and JVM services", "code": "fun main() {\n    println(\"Hello, Kotlin!\")\n}"},
    {"title": "Variables and Null Safety", "description": "val is read-only, var is mutable and nullable types end with a question mark.", "syntax": "val, var, Type?", "usage": "Safe data handling", "code": "val name = \"Alice\"\nvar score = 0\nval nickname: String? = null\nprintln(nickname?.length ?: 0)"},
    {"title": "Functions and Lambdas", "description": "Functions can have default arguments and lambdas make collection code short.", "syntax": "fun name(param: Type): Return", "usage": "Reusable logic", "code": "fun greet(name: String = \"World\") = \"Hello, $name\"\nval evens = (1..10).filter { it % 2 == 0 }"},
    {"title": "Classes and Data Classes", "description": "Data classes generate equals, hashCode, toString and copy.", "syntax": "data class Name(val field: Type)", "usage": "Model data", "code": "data class Task(val id: Int, val title: String, val done: Boolean = false)\nval t = Task(1, \"Learn Kotlin\").copy(done = true)"},
    {"title": "Jetpack Compose", "description": "Compose builds Android UI with composable functions.", "syntax": "@Composable fun Name()", "usage": "Build screens", "code": "@Composable\nfun Greeting(name: String) {\n    Text(text = \"Hello, $name!\")\n}"},
    {"title": "State in Compose", "description": "remember and mutableStateOf keep state across recompositions.", "syntax": "var x by remember { mutableStateOf(initial) }", "usage": "Interactive UI", "code": "@Composable\nfun Counter() {\n    var count by remember { mutableStateOf(0) }\n    Button(onClick = { count++ }) { Text(\"Clicked $count times\") }\n}"},
    {"title": "Coroutines", "description": "Coroutines run asynchronous work without blocking the main thread.", "syntax": "suspend fun, launch, async", "usage": "Networking and background work", "code": "suspend fun loadUser(id: Int): User = withContext(Dispatchers.IO) {\n    api.getUser(id)\n}\n\nviewModelScope.launch { user = loadUser(1) }"},
    {"title": "Project: Habit Tracker", "description": "Build a habit tracker in {name} with Compose lists and a ViewModel.", "syntax": "N/A", "usage": "Apply all concepts", "code": "class HabitViewModel : ViewModel() {\n    val habits = mutableStateListOf<Task>()\n    fun add(title: String) = habits.add(Task(habits.size, title))\n}\n\n@Composable\nfun HabitScreen(vm: HabitViewModel = viewModel()) {\n    LazyColumn {\n        items(vm.habits) { habit -> Text(habit.title) }\n    }\n}"},
)


def react_native_specs(name: str) -> list[SectionSpec]:
    return lessons(name, REACT_NATIVE_LESSONS)


def flutter_specs(name: str) -> list[SectionSpec]:
    return lessons(name, FLUTTER_LESSONS)


def swift_specs(name: str) -> list[SectionSpec]:
    return lessons(name, SWIFT_LESSONS)


def kotlin_specs(name: str) -> list[SectionSpec]:
    return lessons(name, KOTLIN_LESSONS)
