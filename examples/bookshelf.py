from hashset import HashSet, new

# hash set with a known list of items
kings = new(["Einar", "Olaf", "Harald"])

# empty hash set
books: HashSet[str] = new()
books.insert("A Dance With Dragons")
books.insert("To Kill a Mockingbird")
books.insert("The Odyssey")
books.insert("The Great Gatsby")

# check for a specific book
if not books.contains("The Winds of Winter"):
	print(f"We have {len(books)} books, but that isn't one")

books.remove("The Odyssey")

# sorted because order is arbitrary
for title in sorted(books.elems()):
	print(title)
