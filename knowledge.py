# Canned tutor content, keyed by topic.
# Answers use light markdown; the frontend renders **bold** and lists.
# Swap for an LLM-backed source later; the rule chains in tutor.py stay the same.

INTERFERENCE_ANSWER = """**Interference** occurs when two or more waves overlap, resulting in a new wave pattern.

In the double-slit experiment:
- When waves are in phase (crests align), they create **constructive interference** (bright bands)
- When waves are out of phase (crest meets trough), they create **destructive interference** (dark bands)

The spacing of the interference pattern depends on:
- Wavelength of light (λ)
- Distance between slits (d)
- Distance to the screen (L)

Try adjusting the wavelength slider to see how the pattern changes!"""

DUALITY_ANSWER = """**Wave-particle duality** is one of the most fundamental concepts in quantum mechanics.

It means that quantum objects (like electrons, photons) exhibit both wave-like and particle-like properties:

1. **As waves**: They can interfere, diffract, and create patterns
2. **As particles**: They hit detectors at specific points

The key insight: **observation matters**! When we try to determine which slit a particle passes through, the interference pattern disappears.

This is demonstrated beautifully in the double-slit experiment. Try turning on "Observer Mode" to see the difference!"""

TUNNELING_ANSWER = """**Quantum tunneling** is a phenomenon where a particle can pass through a potential barrier even if its energy is less than the barrier height.

Classically, this is impossible - imagine a ball rolling toward a hill without enough energy to go over it.

In quantum mechanics, the particle's wave function extends beyond the barrier, giving a non-zero probability of finding the particle on the other side.

**Key factors affecting tunneling probability:**
- Barrier height (higher = less tunneling)
- Barrier width (wider = less tunneling)
- Particle mass (heavier = less tunneling)
- Particle energy (higher = more tunneling)

Try the Quantum Tunneling simulation to explore these relationships!"""

ORBITAL_ANSWER = """**Atomic orbitals** are regions of space where electrons are most likely to be found.

In the hydrogen atom:
- **s orbitals**: Spherical, can hold 2 electrons
- **p orbitals**: Dumbbell-shaped, can hold 6 electrons  
- **d orbitals**: More complex shapes, can hold 10 electrons

The shapes are determined by the wave function solutions to the Schrödinger equation.

Each orbital is characterized by quantum numbers:
- n (principal): energy level
- l (angular momentum): shape
- m (magnetic): orientation

Explore the Hydrogen Atom simulation to see these orbitals in 3D!"""

# {question} is replaced with the learner's text, verbatim
DEFAULT_ANSWER_TEMPLATE = """That's a great question about physics! 

Based on your question: "{question}"

I'd recommend exploring the relevant simulation to build intuition. You can:
1. Adjust parameters and observe changes
2. Read the theory section for mathematical details
3. Ask more specific questions about what you observe

What aspect would you like to explore further?"""

INTERFERENCE_TOPICS = [
    "Wave-particle duality",
    "Quantum superposition",
    "Wave function collapse",
    "Heisenberg uncertainty principle",
]

TUNNELING_TOPICS = [
    "Potential barriers",
    "Schrödinger equation",
    "Alpha decay",
    "Scanning tunneling microscope",
]

ORBITAL_TOPICS = [
    "Quantum numbers",
    "Electron configuration",
    "Spectral lines",
    "Bohr model",
]

GENERIC_TOPICS = [
    "Quantum mechanics basics",
    "Wave function",
    "Probability in quantum physics",
]

DOUBLE_SLIT_EXPERIMENTS = [
    {
        "simulation_id": "double-slit",
        "title": "Vary the wavelength",
        "description": (
            "Change the wavelength from 400nm to 700nm and observe how the "
            "interference pattern spacing changes"
        ),
    },
    {
        "simulation_id": "double-slit",
        "title": "Toggle observer mode",
        "description": (
            "Turn observer mode on and off to see the dramatic difference "
            "between wave and particle behavior"
        ),
    },
]
