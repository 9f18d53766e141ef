"""Static name pools for diverse, realistic employee names."""

FIRST_NAMES = {
    "male": [
        "James", "John", "Robert", "Michael", "William", "David", "Richard", "Joseph",
        "Thomas", "Christopher", "Daniel", "Matthew", "Anthony", "Mark", "Steven",
        "Andrew", "Kevin", "Brian", "Ryan", "Jacob", "Nicholas", "Eric", "Jonathan",
        "Justin", "Brandon", "Samuel", "Benjamin", "Nathan", "Aaron", "Adam",
        "Carlos", "Luis", "Miguel", "Jose", "Diego", "Ahmed", "Omar", "Hassan",
        "Raj", "Arjun", "Vikram", "Wei", "Jun", "Hiroshi", "Kenji", "Min-jun",
        "Kwame", "Malik", "Andre", "Darius", "Tyrone", "Ivan", "Dmitri", "Mateo",
    ],
    "female": [
        "Mary", "Patricia", "Jennifer", "Linda", "Elizabeth", "Barbara", "Susan",
        "Jessica", "Karen", "Nancy", "Lisa", "Betty", "Margaret", "Sandra", "Ashley",
        "Emily", "Michelle", "Amanda", "Melissa", "Stephanie", "Rebecca", "Laura",
        "Rachel", "Hannah", "Olivia", "Sophia", "Isabella", "Maria", "Sofia",
        "Camila", "Valentina", "Lucia", "Fatima", "Aisha", "Layla", "Priya",
        "Ananya", "Deepa", "Mei", "Ying", "Yuki", "Sakura", "Ji-woo", "Soo-ah",
        "Amara", "Imani", "Keisha", "Nia", "Olga", "Natasha", "Elena", "Gabriela",
    ],
    "neutral": [
        "Alex", "Jordan", "Taylor", "Morgan", "Casey", "Riley", "Jamie", "Avery",
        "Quinn", "Rowan", "Skyler", "Sage", "Reese", "Emerson", "Finley", "Hayden",
        "Kai", "River", "Phoenix", "Dakota", "Charlie", "Parker", "Remy", "Ari",
    ],
}

LAST_NAMES = [
    "Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Miller", "Davis",
    "Rodriguez", "Martinez", "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin", "Lee", "Perez", "Thompson",
    "White", "Harris", "Sanchez", "Clark", "Ramirez", "Lewis", "Robinson", "Walker",
    "Young", "Allen", "King", "Wright", "Scott", "Torres", "Nguyen", "Hill",
    "Flores", "Green", "Adams", "Nelson", "Baker", "Hall", "Rivera", "Campbell",
    "Mitchell", "Carter", "Roberts", "Chen", "Wang", "Li", "Zhang", "Liu", "Kim",
    "Park", "Choi", "Tanaka", "Suzuki", "Patel", "Shah", "Singh", "Kumar", "Gupta",
    "Khan", "Ali", "Hassan", "Okafor", "Mensah", "Diallo", "Ivanov", "Petrov",
    "Kowalski", "Novak", "Muller", "Schmidt", "Rossi", "Silva", "Santos", "Costa",
]

# Which first-name pool each gender value draws from
GENDER_NAME_POOL = {
    "Male": "male",
    "Female": "female",
}
