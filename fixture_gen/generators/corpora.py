"""Static corpora used for name and internet-syntax generation."""

MALE_FIRST_NAMES: tuple[str, ...] = (
    "Adam", "Adrian", "Albert", "Alexander", "Andrew", "Anthony", "Arthur",
    "Benjamin", "Bernard", "Bruce", "Carl", "Charles", "Christopher", "Daniel",
    "David", "Dennis", "Dominic", "Edward", "Elias", "Emil", "Eric", "Felix",
    "Francis", "Frank", "Frederick", "George", "Gregory", "Harold", "Henry",
    "Hugo", "Isaac", "Jack", "Jacob", "James", "Jean-Luc", "Jeremy", "John",
    "Jonas", "Joseph", "Karl", "Kevin", "Lars", "Leon", "Louis", "Lucas",
    "Malte", "Marcus", "Martin", "Matthew", "Maximilian", "Michael", "Nathan",
    "Nicholas", "Noah", "Oliver", "Oscar", "Patrick", "Paul", "Peter",
    "Philip", "Raymond", "Richard", "Robert", "Samuel", "Sebastian", "Simon",
    "Stephen", "Thomas", "Timothy", "Tobias", "Victor", "Walter", "William",
)

FEMALE_FIRST_NAMES: tuple[str, ...] = (
    "Abigail", "Alice", "Amelia", "Anna", "Anne-Marie", "Barbara", "Beatrice",
    "Bianca", "Carla", "Caroline", "Charlotte", "Chloe", "Clara", "Daisy",
    "Diana", "Dorothy", "Eleanor", "Elisabeth", "Ella", "Emily", "Emma",
    "Eva", "Florence", "Frieda", "Grace", "Hannah", "Harriet", "Helen",
    "Ida", "Irene", "Isabel", "Jane", "Jessica", "Josephine", "Julia",
    "Karen", "Katherine", "Laura", "Lena", "Lily", "Linda", "Louise", "Lucy",
    "Margaret", "Maria", "Marie-Claire", "Martha", "Mary", "Mia", "Nina",
    "Olivia", "Paula", "Rachel", "Rebecca", "Rose", "Ruth", "Sarah",
    "Sophia", "Stella", "Susan", "Tanja", "Theresa", "Ursula", "Victoria",
    "Wilma", "Yvonne", "Zoe",
)

LAST_NAMES: tuple[str, ...] = (
    "Adams", "Anderson", "Baker", "Becker", "Bennett", "Braun", "Brown",
    "Campbell", "Carter", "Clark", "Collins", "D'Angelo", "Davis", "Edwards",
    "Evans", "Fischer", "Fitzgerald", "Garcia", "Green", "Hall", "Harris",
    "Hoffmann", "Jackson", "Johnson", "Jones", "Keller", "King", "Koch",
    "Lee", "Lewis", "MacDonald", "Martin", "McAllister", "Miller", "Mitchell",
    "Moore", "Mueller", "Nelson", "O'Brien", "O'Connor", "Parker", "Phillips",
    "Richter", "Roberts", "Robinson", "Schmidt", "Schneider", "Schulz",
    "Scott", "Smith", "Taylor", "Thomas", "Thompson", "Turner", "Wagner",
    "Walker", "Weber", "White", "Williams", "Wilson", "Wright", "Young",
    "Zimmermann",
)

TOP_LEVEL_DOMAINS: tuple[str, ...] = (
    "com", "net", "org", "info", "biz", "io", "dev", "de", "fr", "uk", "nl",
    "eu", "us", "ca", "jp", "name",
)

URL_SCHEMES: tuple[str, ...] = ("http", "https", "ftp")
